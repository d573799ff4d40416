from dataclasses import dataclass


@dataclass
class UserDetails:
    """A single entry of the user roster report."""

    id: int
    name: str
    email: str
    role: str
    created_at: str

    def to_row(self) -> list[str]:
        return [str(self.id), self.name, self.email, self.role, self.created_at]
