"""
Multipart form owned by a Request.

Parts are only described here. File-backed parts are opened when the
transfer runs, so the file has to exist until execute() returns.
"""

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class FilePart:
    """File streamed from disk during the transfer."""
    name: str
    path: str
    filename: Optional[str] = None

    @property
    def display_filename(self) -> str:
        return self.filename or os.path.basename(self.path)


@dataclass(frozen=True)
class FieldPart:
    """In-memory data part."""
    name: str
    data: bytes


FormPart = Union[FilePart, FieldPart]


class MultipartForm:
    """
    Ordered collection of form parts.

    Example:
        >>> form = MultipartForm()
        >>> form.add_field("title", "report")
        >>> form.add_file("upload", "/tmp/report.csv", "report.csv")
        >>> with form.open() as files:
        ...     session.post(url, files=files)
    """

    def __init__(self):
        self._parts: List[FormPart] = []

    def add_file(self, name: str, path: str, filename: Optional[str] = None) -> FilePart:
        part = FilePart(name=name, path=os.fspath(path), filename=filename)
        self._parts.append(part)
        return part

    def add_field(
        self,
        name: str,
        data: Union[str, bytes],
        size: Optional[int] = None
    ) -> FieldPart:
        """
        Add an in-memory part.

        Args:
            name: Field name
            data: Field value (str is encoded as UTF-8)
            size: Use only the first `size` bytes of data (None = all)
        """
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        if size is not None:
            if size < 0:
                raise ValueError("size must be non-negative")
            payload = payload[:size]

        part = FieldPart(name=name, data=payload)
        self._parts.append(part)
        return part

    @property
    def parts(self) -> Tuple[FormPart, ...]:
        return tuple(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    @contextmanager
    def open(self) -> Iterator[List[Tuple[str, tuple]]]:
        """
        Open file parts and yield them in the `files=` format of requests.

        Files are closed when the block exits. OSError is raised if a
        file cannot be opened.
        """
        with ExitStack() as stack:
            files: List[Tuple[str, tuple]] = []
            for part in self._parts:
                if isinstance(part, FilePart):
                    fh = stack.enter_context(open(part.path, "rb"))
                    files.append((part.name, (part.display_filename, fh)))
                else:
                    files.append((part.name, (None, part.data)))
            yield files

    def free(self) -> None:
        """Drop all parts."""
        self._parts.clear()
