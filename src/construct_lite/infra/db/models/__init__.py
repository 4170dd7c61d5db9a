from construct_lite.infra.db.models.base import Base
from construct_lite.infra.db.models.design import DesignRow

__all__ = ["Base", "DesignRow"]
