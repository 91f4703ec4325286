from dataclasses import dataclass

from app.navguard.navigation.models import Grant, ViewerContext


@dataclass(frozen=True)
class RequestContext:
    user_id: str | None
    role: str | None
    permissions: tuple[Grant, ...] | None
    trace_id: str

    @property
    def viewer(self) -> ViewerContext:
        return ViewerContext(role=self.role, permissions=self.permissions)


def build_request_context(
    *,
    user_id: str | None,
    role: str | None,
    permissions: tuple[Grant, ...] | None,
    trace_id: str,
) -> RequestContext:
    return RequestContext(
        user_id=user_id,
        role=role,
        permissions=permissions,
        trace_id=trace_id,
    )
