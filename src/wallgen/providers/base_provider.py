from abc import ABC, abstractmethod
from typing import Optional

from wallgen.models import TextCompletion


class BaseTextProvider(ABC):
    @abstractmethod
    async def complete(
        self, instruction: str, image: Optional[str] = None
    ) -> TextCompletion:
        """
        Sends one non-streaming instruction to the text-generation model.
        Failures are returned as TextCompletion(error=...) instead of raised.
        """
        pass

    async def close(self):
        pass
