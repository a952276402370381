"""
Upload Slots - NegocIA
negocia/ui/uploads.py

One file slot per category, held in dashboard session state.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from negocia.models.enumerations import Category
from negocia.services.file_reader import ALLOWED_EXTENSIONS, is_allowed_file


@dataclass(frozen=True)
class UploadedFile:
    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class UploadOutcome:
    accepted: bool
    message: str


@dataclass
class UploadSet:
    """Maps each category to its current file. Uploading replaces the slot."""

    slots: Dict[Category, Optional[UploadedFile]] = field(
        default_factory=lambda: {category: None for category in Category}
    )
    # Last rejected (name, size) per category, so a rejected file is reported once
    rejected: Dict[Category, Tuple[str, int]] = field(default_factory=dict)

    def set(self, category: Category, file: UploadedFile) -> None:
        self.slots[category] = file

    def get(self, category: Category) -> Optional[UploadedFile]:
        return self.slots.get(category)

    def uploaded(self) -> List[Tuple[Category, UploadedFile]]:
        """Filled slots in category order."""
        return [(c, self.slots[c]) for c in Category if self.slots.get(c) is not None]

    @property
    def count(self) -> int:
        return len(self.uploaded())

    def offer(self, category: Category, file: UploadedFile, max_bytes: int) -> Optional[UploadOutcome]:
        """
        Try to place a file from the upload widget into a slot.

        Returns None when the file was already handled on an earlier rerun,
        either accepted into the slot or rejected.
        """
        if self.slots.get(category) == file:
            return None
        fingerprint = (file.name, file.size)
        if self.rejected.get(category) == fingerprint:
            return None

        problem = check_upload(file, max_bytes)
        if problem:
            self.rejected[category] = fingerprint
            return UploadOutcome(accepted=False, message=problem)

        self.rejected.pop(category, None)
        self.set(category, file)
        return UploadOutcome(
            accepted=True,
            message=f'Archivo "{file.name}" cargado para {category.label}',
        )


def check_upload(file: UploadedFile, max_bytes: int) -> Optional[str]:
    """Notification text when a file may not be accepted, else None."""
    if not is_allowed_file(file.name):
        return f"Formato no soportado: {file.name} (usa {', '.join(ALLOWED_EXTENSIONS)})"
    if file.size > max_bytes:
        return f"El archivo {file.name} supera el máximo de {max_bytes // (1024 * 1024)}MB"
    return None
