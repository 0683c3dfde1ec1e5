from abc import ABC, abstractmethod
from typing import Optional


class IEmailService(ABC):
    @abstractmethod
    async def send_email(
        self,
        *,
        to: str,
        subject: str,
        body: str,
        image_data_uri: Optional[str] = None,
    ) -> None:
        """Deliver one message. Raises on delivery failure."""
        pass
