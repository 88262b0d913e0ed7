import logging

from clipdir.content.base import ContentClassifier
from clipdir.models import Entry, StorageError
from clipdir.utils import human_readable_size

logger = logging.getLogger(__name__)

ASCII_WHITESPACE = " \t\n\x0c\r"


class PreviewRenderer:

    def __init__(self, preview_length: int):
        self.preview_length = preview_length

    def render(self, entry: Entry) -> str:
        if entry.type_tag == ContentClassifier.TEXT_TAG:
            return self._render_text(entry)
        return self._render_binary(entry)

    def render_line(self, index: int, entry: Entry) -> str:
        return f"{index}\t{self.render(entry)}"

    def _render_text(self, entry: Entry) -> str:
        try:
            with entry.path.open("rb") as handle:
                prefix = handle.read(self.preview_length)
        except OSError as e:
            raise StorageError(
                f"Failed to read clipboard file {entry.name}: {e}") from e

        try:
            text = prefix.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug(f"Preview of {entry.name} is not valid UTF-8, using byte characters")
            text = prefix.decode("latin-1")

        text = text.strip(ASCII_WHITESPACE)
        return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")

    def _render_binary(self, entry: Entry) -> str:
        try:
            size = entry.path.stat().st_size
        except OSError as e:
            raise StorageError(
                f"Failed to read clipboard file metadata {entry.name}: {e}") from e
        return f"[[ binary data {human_readable_size(size)} {entry.type_tag} ]]"
