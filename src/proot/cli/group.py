"""Click group that accepts a bare PR number in place of a command name."""

import click

OPEN_COMMAND_NAME = "open"


class PrNumberGroup(click.Group):
    """Click Group where `proot 123` is shorthand for `proot open 123`."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and args[0].isdigit():
            open_cmd = self.get_command(ctx, OPEN_COMMAND_NAME)
            if open_cmd is not None:
                return OPEN_COMMAND_NAME, open_cmd, args
        return super().resolve_command(ctx, args)

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write_usage(ctx.command_path, "[OPTIONS] [PR_NUMBER | COMMAND [ARGS]...]")
