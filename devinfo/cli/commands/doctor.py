import sys

import psutil
import typer

from devinfo.internal.logging import get_logger
from devinfo.runtime.system import get_default_reader

logger = get_logger(__name__)

# MemTotal is rounded down to whole MB, psutil reports bytes
RAM_TOLERANCE_MB = 1


def doctor():
    """
    Cross-check the kernel file readings against psutil.
    """
    typer.echo("Running devinfo doctor checks...\n")
    all_passed = True
    reader = get_default_reader()

    def check(description: str, func):
        nonlocal all_passed
        typer.echo(f"- {description}...", nl=False)
        result, message = func()
        if result:
            typer.echo(f" {typer.style('PASSED', fg=typer.colors.GREEN)}")
        else:
            typer.echo(f" {typer.style('FAILED', fg=typer.colors.RED)}")
            typer.echo(f"  Reason: {message}")
            all_passed = False

    # --- Sources ---
    typer.echo(typer.style("Sources:", fg=typer.colors.BLUE, bold=True))
    typer.echo(f"  Python Version: {sys.version.split()[0]}")
    typer.echo(f"  CPU directory: {reader.cpu_dir}")
    typer.echo(f"  Memory info: {reader.meminfo_path}")
    typer.echo("")

    typer.echo(typer.style("Checks:", fg=typer.colors.BLUE, bold=True))

    def check_cpu_dir():
        cpu_dir = reader.cpu_dir
        return cpu_dir.is_dir(), f"Directory '{cpu_dir}' not found or not a directory."
    check("CPU directory readable", check_cpu_dir)

    def check_meminfo():
        meminfo = reader.meminfo_path
        return meminfo.is_file(), f"File '{meminfo}' not found."
    check("Memory info file readable", check_meminfo)

    def check_cpu_count():
        detected = reader.get_cpu_core_count()
        expected = psutil.cpu_count(logical=True)
        if expected is None:
            return False, "psutil could not determine the logical CPU count."
        return detected == expected, f"Detected {detected} core(s), psutil reports {expected}."
    check("CPU core count matches psutil", check_cpu_count)

    def check_ram():
        detected = reader.get_total_ram_megabytes()
        if detected == 0:
            return False, "Total RAM could not be determined."
        expected = psutil.virtual_memory().total // (1024 * 1024)
        return abs(detected - expected) <= RAM_TOLERANCE_MB, f"Detected {detected} MB, psutil reports {expected} MB."
    check("Total RAM matches psutil", check_ram)

    typer.echo("\n--- Doctor Check Summary ---")
    if all_passed:
        typer.echo(typer.style("All checks PASSED!", fg=typer.colors.GREEN, bold=True))
        return

    logger.warning("Doctor checks failed")
    typer.echo(typer.style("Some checks FAILED. Please review the output above.", fg=typer.colors.RED, bold=True))
    raise typer.Exit(1)


if __name__ == "__main__":
    typer.run(doctor)
