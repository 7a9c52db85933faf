"""Loading JSON and YAML files into documents with line-number metadata."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

JSON_DOC = "json"
YAML_DOC = "yaml"


@dataclass
class IacDocument:
    """Raw IaC document data with the lines it spans in its file."""

    type: str
    start_line: int
    end_line: int
    file_path: str
    data: bytes = b""


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_json(file_path: str) -> list[IacDocument]:
    """Load a JSON file as a single document."""
    data = Path(file_path).read_bytes()
    line_count = len(_lines(data.decode("utf-8", errors="replace")))
    return [
        IacDocument(
            type=JSON_DOC,
            start_line=1,
            end_line=line_count + 1,
            file_path=file_path,
            data=data,
        )
    ]


def scan_iac_documents_from_yaml(text: str, file_path: str) -> list[IacDocument]:
    """Split YAML text into documents, recording the lines each one spans.

    Each document's data is the re-serialised YAML of its parsed content.
    Raises ``yaml.YAMLError`` on invalid YAML and ``ValueError`` when the
    parser finds more documents than separators were counted.
    """
    documents: list[IacDocument] = []
    start_line = 1
    current_line = 1
    for line in _lines(text):
        if line.startswith("---"):
            documents.append(
                IacDocument(
                    type=YAML_DOC,
                    start_line=start_line,
                    end_line=current_line,
                    file_path=file_path,
                )
            )
            start_line = current_line + 1
        current_line += 1

    documents.append(
        IacDocument(type=YAML_DOC, start_line=start_line, end_line=current_line, file_path="")
    )

    for index, value in enumerate(yaml.safe_load_all(text)):
        if index >= len(documents):
            raise ValueError("document count was higher than expected count")
        documents[index].data = yaml.safe_dump(
            value, default_flow_style=False, sort_keys=True
        ).encode("utf-8")

    return documents


def load_yaml(file_path: str) -> list[IacDocument]:
    """Load a YAML file as one or more documents."""
    text = Path(file_path).read_text(encoding="utf-8")
    return scan_iac_documents_from_yaml(text, file_path)


def load_yaml_string(data: str, abs_file_path: str) -> list[IacDocument]:
    """Load YAML text as one or more documents attributed to ``abs_file_path``."""
    return scan_iac_documents_from_yaml(data, abs_file_path)


def read_yaml_file(path: str) -> dict[str, Any]:
    """Read a YAML file whose top level is a mapping."""
    content = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"{path}: top-level YAML value is not a mapping")
    return content