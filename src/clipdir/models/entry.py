from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
	"""Immutable reference to one stored clipboard capture."""
	path: Path

	@property
	def name(self) -> str:
		return self.path.name

	@property
	def type_tag(self) -> str:
		suffix = self.path.suffix
		return suffix[1:] if len(suffix) > 1 else "bin"

	@staticmethod
	def storage_name(timestamp: int, type_tag: str) -> str:
		return f"{timestamp}.{type_tag}"
