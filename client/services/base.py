from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from client.app import ClientApp
    from client.operator import NetworkLayer


class ServiceBase:
    def __init__(self, app: "ClientApp") -> None:
        self.app = app

    @property
    def network(self) -> "NetworkLayer":
        return self.app.network
