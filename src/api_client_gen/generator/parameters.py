"""Split an operation's parameters by transport location."""

from pydantic import BaseModel, ConfigDict

from api_client_gen.parser.base import Operation, Parameter


class ParameterGroups(BaseModel):
    """One field per transport location."""

    model_config = ConfigDict(frozen=True)

    path: tuple[Parameter, ...] = ()
    query: tuple[Parameter, ...] = ()
    header: tuple[Parameter, ...] = ()
    cookie: tuple[Parameter, ...] = ()
    body: Parameter | None = None

    @property
    def path_required(self) -> bool:
        # path parameters are required by presence, whatever their flag says
        return len(self.path) > 0

    @property
    def query_required(self) -> bool:
        return any(p.required for p in self.query)

    @property
    def header_required(self) -> bool:
        return any(p.required for p in self.header)

    @property
    def cookie_required(self) -> bool:
        return any(p.required for p in self.cookie)

    @property
    def body_required(self) -> bool:
        if self.body is None:
            return False
        if self.body.required:
            return True
        schema = self.body.schema_ or {}
        return bool(schema.get("required"))


def classify_parameters(operation: Operation) -> ParameterGroups:
    """Partition the parameters of *operation*. Absent parameters mean none."""
    params = operation.parameters or []
    return ParameterGroups(
        path=tuple(p for p in params if p.location == "path"),
        query=tuple(p for p in params if p.location == "query"),
        header=tuple(p for p in params if p.location == "header"),
        cookie=tuple(p for p in params if p.location == "cookie"),
        body=next((p for p in params if p.location == "body"), None),
    )
