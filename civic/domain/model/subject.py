"""Subjects: the entities that carry votes and comments."""

from typing import Union

from civic.domain.model.group import Group
from civic.domain.model.issue import Issue

Subject = Union[Issue, Group]
