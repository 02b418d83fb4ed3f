#!/usr/bin/env python3

import aws_cdk as cdk

from vehicle_rental_stack import VehicleRentalStack

app = cdk.App()
VehicleRentalStack(
    app,
    "VehicleRentalStack",
)

app.synth()
