"""Skill types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SkillFileEntry:
    """A file or directory in a skill file store.

    ``path`` is relative to the store root and always uses ``/``.
    """

    name: str
    path: str
    is_directory: bool


@dataclass(frozen=True)
class ParsedSkill:
    """The required fields of a skill definition file, plus its body."""

    name: str
    description: str
    body: str


@dataclass(frozen=True)
class SkillPrompt:
    """A skill exposed to the host server as a prompt."""

    name: str
    description: str
    body: str

    def render(self) -> str:
        return self.body


@dataclass(frozen=True)
class SkillResource:
    """A skill file exposed to the host server as a read-only resource."""

    name: str
    uri: str
    description: str
    mime_type: str
    content: str

    def read(self) -> str:
        return self.content
