from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# (パス, メソッド) -> 予約 API
BOOKING_ROUTES: list[tuple[str, str]] = [
    ("available-vehicles", "GET"),
    ("admin", "GET"),
    ("message", "POST"),
    ("cancel", "PATCH"),
    ("confirm", "PATCH"),
    ("finish", "PATCH"),
    ("feedback", "PATCH"),
    ("rate", "PATCH"),
]


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        user_api: _lambda.Function,
        booking_api: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "RentalRestApi",
            rest_api_name="Vehicle Rental API",
            deploy_options=apigw.StageOptions(stage_name="prod"),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
                allow_headers=["Origin", "Content-Type", "Accept"],
            ),
        )

        user_integration = apigw.LambdaIntegration(user_api)
        booking_integration = apigw.LambdaIntegration(booking_api)

        # POST /users, POST /users/login
        users_resource = self.rest_api.root.add_resource("users")
        users_resource.add_method("POST", user_integration)
        users_resource.add_resource("login").add_method("POST", user_integration)

        # GET /bookings, POST /bookings
        bookings_resource = self.rest_api.root.add_resource("bookings")
        bookings_resource.add_method("GET", booking_integration)
        bookings_resource.add_method("POST", booking_integration)

        for path, method in BOOKING_ROUTES:
            bookings_resource.add_resource(path).add_method(method, booking_integration)
