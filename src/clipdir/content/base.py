from abc import ABC, abstractmethod
from typing import Optional


class ContentClassifier(ABC):

    TEXT_TAG = "txt"
    BINARY_TAG = "bin"

    def classify(self, payload: bytes) -> str:
        """Return the short type tag used to name and preview ``payload``.

        Known binary signatures win; otherwise valid UTF-8 is ``txt`` and
        anything else is ``bin``. Only the bytes are consulted.
        """
        tag = self._sniff(payload)
        if tag:
            return tag
        try:
            payload.decode("utf-8")
        except UnicodeDecodeError:
            return self.BINARY_TAG
        return self.TEXT_TAG

    @abstractmethod
    def _sniff(self, payload: bytes) -> Optional[str]:
        pass
