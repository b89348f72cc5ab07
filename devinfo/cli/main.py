import typer

from devinfo.cli.commands import (
    doctor,
    info,
    version,
)
from devinfo.internal import paths
from devinfo.internal.logging import setup_logging

app = typer.Typer(
    name="devinfo",
    help="Device hardware and OS information.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level (DEVINFO_LOG_LEVEL overrides)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo log events to stderr."),
    log_file: bool = typer.Option(False, "--log-file", help="Also write JSON logs to the app data directory."),
):
    setup_logging(
        log_level_name=log_level,
        log_file_path=paths.get_log_file() if log_file else None,
        console_output=verbose,
    )


app.command("info")(info.info)
app.command("cpu")(info.cpu)
app.command("ram")(info.ram)
app.command("doctor")(doctor.doctor)
app.command("version")(version.version)

if __name__ == "__main__":
    app()
