from abc import ABC, abstractmethod

from core.config import Settings


class App(ABC):
    settings: Settings

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @abstractmethod
    def run(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        """Release network resources held by the app."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
