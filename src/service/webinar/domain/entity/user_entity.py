from typing import Optional

import attrs


@attrs.define(frozen=True)
class UserEntity:
    id: str
    email: Optional[str] = None
