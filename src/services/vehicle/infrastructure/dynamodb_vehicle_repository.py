import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Key

from services.shared.domain import Money
from services.shared.utils.dynamodb import query_all
from services.vehicle.domain.entity import Vehicle
from services.vehicle.domain.enum import VehicleStatus
from services.vehicle.domain.repository import VehicleRepository
from services.vehicle.domain.value_object import VehicleId


class DynamoDBVehicleRepository(VehicleRepository):
    """DynamoDBを使用したVehicleRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, vehicle: Vehicle) -> None:
        """車両をDBに保存する（同一IDは上書き）"""
        self.table.put_item(
            Item={
                "PK": f"VEHICLE#{vehicle.id}",
                "SK": "VEHICLE",
                "entity_type": "VEHICLE",
                "vehicle_id": str(vehicle.id),
                "status": vehicle.status.value,
                "brand": vehicle.brand,
                "brand_model": vehicle.brand_model,
                "transmission_type": vehicle.transmission_type,
                "year": vehicle.year,
                "type": vehicle.type,
                "hourly_fare": str(vehicle.hourly_fare.amount),
                "GSI1PK": "VEHICLES",
                "GSI1SK": f"VEHICLE#{vehicle.id}",
            }
        )

    def find_by_id(self, vehicle_id: VehicleId) -> Vehicle | None:
        """車両IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"VEHICLE#{vehicle_id}", "SK": "VEHICLE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Vehicle]:
        """全車両を取得"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("VEHICLES"),
        )
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Vehicle:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Vehicle(
            id=VehicleId(value=item["vehicle_id"]),
            status=VehicleStatus(item["status"]),
            brand=item["brand"],
            brand_model=item["brand_model"],
            transmission_type=item["transmission_type"],
            year=int(item["year"]),
            type=item["type"],
            hourly_fare=Money(amount=Decimal(item["hourly_fare"])),
        )
