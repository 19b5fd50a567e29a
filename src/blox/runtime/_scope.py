"""Two-tier variable scope: the stage (global) and one local target."""

from __future__ import annotations

from collections.abc import Iterator

from blox.model.refs import ref_name
from blox.model.target import Target
from blox.model.variables import Variable, VariableType, new_uid


class ScopeChain:
    """Explicit stage + local scope used to find or create variables.

    Parameters
    ----------
    stage : Target
        The global scope.
    local : Target | None
        The sprite whose blocks are running; ``None`` or the stage itself
        collapses the chain to a single tier.
    """

    def __init__(self, stage: Target, local: Target | None = None) -> None:
        self.stage = stage
        self.local = local if local is not None else stage

    def __iter__(self) -> Iterator[Target]:
        yield self.stage
        if self.local is not self.stage:
            yield self.local

    def for_each_variable(self) -> Iterator[Variable]:
        """Every variable in the chain, stage variables first."""
        for target in self:
            yield from target.variables.values()

    def variable_names(self, variable_type: VariableType) -> list[str]:
        return [v.name for v in self.for_each_variable() if v.type == variable_type]

    def lookup(
        self,
        name: str,
        variable_type: VariableType = VariableType.SCALAR,
    ) -> Variable | None:
        """Find by name; a local variable shadows a stage one of the same name."""
        variable = self.local.lookup_variable_by_name_and_type(name, variable_type)
        if variable is None and self.local is not self.stage:
            variable = self.stage.lookup_variable_by_name_and_type(name, variable_type)
        return variable

    def resolve(
        self,
        ref: object,
        variable_type: VariableType = VariableType.SCALAR,
    ) -> Variable:
        """Look up, or create in the local scope, the variable *ref* names."""
        name = ref_name(ref)
        variable = self.lookup(name, variable_type)
        if variable is None:
            variable = self.local.create_variable(new_uid(), name, variable_type)
        return variable
