"""Row model: the unit of display in the status pane."""
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""
    text: str
    style: Optional[str] = None  # A StyleTag value, None = default color
    bold: bool = False


@dataclass(frozen=True)
class StyledText:
    """Styled, possibly multi-line text. Colors are resolved by the renderer."""
    spans: Tuple[Span, ...] = ()

    @classmethod
    def of(cls, text: str, style: Optional[str] = None, bold: bool = False) -> "StyledText":
        """Styled text made of a single span."""
        return cls((Span(text, style, bold),))

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)

    def __str__(self) -> str:
        return self.plain


@dataclass(frozen=True)
class FileTarget:
    """A path in the working tree."""
    path: str


@dataclass(frozen=True)
class DeltaTarget:
    """A changed file within a diff."""
    old_file: str
    new_file: str


@dataclass(frozen=True)
class HunkTarget:
    """One hunk of a changed file."""
    file_header: str
    header: str


@dataclass(frozen=True)
class CommitTarget:
    """A commit, by (abbreviated) hash."""
    reference: str


ActionTarget = Union[FileTarget, DeltaTarget, HunkTarget, CommitTarget]


@dataclass(frozen=True)
class Row:
    """One row of the status pane.

    Rows are plain values: the whole sequence is rebuilt on every refresh and
    ``identity`` is only used to keep the cursor on the same row across rebuilds.
    """
    identity: str
    display: StyledText
    depth: int = 0
    is_section_header: bool = False
    is_selectable: bool = True
    action_target: Optional[ActionTarget] = None
