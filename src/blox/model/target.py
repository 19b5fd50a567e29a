"""Targets: the stage and sprites, each owning a variable namespace."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from .variables import Variable, VariableType

logger = logging.getLogger(__name__)

CLOUD_VARIABLE_LIMIT = 10


class Target(BaseModel):
    """A stage or sprite with its own variables, keyed by variable id.

    Names are unique per type within one target; the same name may exist
    on another target.
    """

    name: str
    is_stage: bool = False
    variables: dict[str, Variable] = {}

    def lookup_variable_by_id(self, variable_id: str) -> Variable | None:
        return self.variables.get(variable_id)

    def lookup_variable_by_name_and_type(
        self,
        name: str,
        variable_type: VariableType = VariableType.SCALAR,
    ) -> Variable | None:
        for variable in self.variables.values():
            if variable.name == name and variable.type == variable_type:
                return variable
        return None

    def variables_of_type(self, variable_type: VariableType) -> list[Variable]:
        return [v for v in self.variables.values() if v.type == variable_type]

    def cloud_variable_count(self) -> int:
        return sum(1 for v in self.variables.values() if v.is_cloud)

    def create_variable(
        self,
        variable_id: str,
        name: str,
        variable_type: VariableType = VariableType.SCALAR,
        is_cloud: bool = False,
    ) -> Variable:
        """Create a variable, or return the existing one with that id.

        The cloud flag is only granted on the stage and only while the
        stage holds fewer than ``CLOUD_VARIABLE_LIMIT`` cloud variables.
        """
        existing = self.variables.get(variable_id)
        if existing is not None:
            return existing
        if is_cloud and not (
            self.is_stage and self.cloud_variable_count() < CLOUD_VARIABLE_LIMIT
        ):
            logger.debug("Refusing cloud flag for %r on %r", name, self.name)
            is_cloud = False
        variable = Variable(
            id=variable_id, name=name, type=variable_type, is_cloud=is_cloud,
        )
        self.variables[variable_id] = variable
        return variable

    def rename_variable(self, variable_id: str, new_name: str) -> Variable | None:
        """Rename in place; the id, and therefore identity, is unchanged."""
        variable = self.variables.get(variable_id)
        if variable is None:
            return None
        variable.name = new_name
        return variable

    def delete_variable(self, variable_id: str) -> Variable | None:
        return self.variables.pop(variable_id, None)
