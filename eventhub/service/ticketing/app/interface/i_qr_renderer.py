from abc import ABC, abstractmethod


class IQrRenderer(ABC):
    @abstractmethod
    def render(self, text: str) -> str:
        """Encode text as a QR image and return it as a data:image/png;base64 URI."""
        pass
