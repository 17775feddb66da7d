from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        pass
