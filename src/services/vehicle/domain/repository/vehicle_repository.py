from abc import abstractmethod
from typing import Optional

from services.shared.domain import Repository
from services.vehicle.domain.entity import Vehicle
from services.vehicle.domain.value_object import VehicleId


class VehicleRepository(Repository[Vehicle, VehicleId]):
    """車両レポジトリ"""

    @abstractmethod
    def save(self, vehicle: Vehicle) -> None:
        """永続化する（登録・更新の両方）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        """車両IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Vehicle]:
        """全車両を取得"""
        raise NotImplementedError
