from collections.abc import Callable

from todolist_service.core.application.dtos.user_dto import serialize_users
from todolist_service.core.application.services.user_service import UserService
from todolist_service.core.domain.user import User


class SeedUsersReportUseCase:
    """
    Seeds the demo users, reads them back and writes the report.
    Output lines go through `echo` (stdout by default).
    """

    def __init__(self, user_service: UserService, echo: Callable[[str], None] = print):
        self.user_service = user_service
        self.echo = echo

    def execute(self) -> list[User]:
        self.user_service.create_dummy_users()
        self.echo("Dummy users created successfully.")

        users = self.user_service.get_all_users()
        self.echo("All Users:")
        for user in users:
            self.echo(user.display_line())

        self.echo(f"Users JSON: {serialize_users(users)}")
        return users
