"""Permission matrix aliases."""

from collections.abc import Mapping

# resource -> action -> allowed. Absent entries deny.
PermissionMatrix = dict[str, dict[str, bool]]

# Read-only view accepted by the resolver; values may be malformed.
MatrixLike = Mapping[str, Mapping[str, object]]
