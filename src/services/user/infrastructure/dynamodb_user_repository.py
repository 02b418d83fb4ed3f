import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.shared.domain.exception.exceptions import DuplicateResourceException
from services.shared.utils.dynamodb import query_all
from services.user.domain.entity import User
from services.user.domain.enum import UserRole
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import Email, UserId


class DynamoDBUserRepository(UserRepository):
    """DynamoDBを使用したUserRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, user: User) -> None:
        """ユーザーをDBに保存する"""
        item = {
            "PK": f"USER#{user.id}",
            "SK": "PROFILE",
            "entity_type": "USER",
            "user_id": str(user.id),
            "email": str(user.email),
            "name": user.name,
            "password": user.password,
            "national_id": user.national_id,
            "role": user.role.value,
            "GSI1PK": f"EMAIL#{user.email}",
            "GSI1SK": f"USER#{user.id}",
            "GSI2PK": f"NATIONAL_ID#{user.national_id}",
            "GSI2SK": f"USER#{user.id}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"User already exists: {user.id}")
            raise

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索"""
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: Email) -> User | None:
        """メールアドレスで検索"""
        return self._find_one("GSI1", Key("GSI1PK").eq(f"EMAIL#{email}"))

    def find_by_national_id(self, national_id: str) -> User | None:
        """身分証番号で検索"""
        return self._find_one("GSI2", Key("GSI2PK").eq(f"NATIONAL_ID#{national_id}"))

    def _find_one(self, index_name: str, key_condition) -> User | None:
        items = query_all(
            self.table,
            IndexName=index_name,
            KeyConditionExpression=key_condition,
        )
        if not items:
            return None
        return self._to_entity(items[0])

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return User(
            id=UserId(value=item["user_id"]),
            email=Email(item["email"]),
            name=item["name"],
            password=item["password"],
            national_id=item["national_id"],
            role=UserRole(item["role"]),
        )
