"""
Utility functions for testing.
"""

from collections.abc import Callable
from pathlib import Path

# Signature of the ``write_skill_file`` fixture: (relative path, content) -> path
WriteSkillFile = Callable[[str, str], Path]

GREET_MD = "---\nname: greet\ndescription: Say hi.\n---\n# Hello"
GREET_YAML_NO_BODY = "name: greet\ndescription: Say hi."
