import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import RUNTIME


class Functions(Construct):
    """Lambda 関数を管理する Construct

    ユーザー API と予約 API をそれぞれ1つの関数でルーティングする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.user_api = self._create_function(
            "UserApiLambda",
            "services.user.handlers.api.lambda_handler",
            "user-service",
            table,
            common_layer,
        )

        self.booking_api = self._create_function(
            "BookingApiLambda",
            "services.booking.handlers.api.lambda_handler",
            "booking-service",
            table,
            common_layer,
        )

        for fn in self.all_functions:
            table.grant_read_write_data(fn)

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [self.user_api, self.booking_api]

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
