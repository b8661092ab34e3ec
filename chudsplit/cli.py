import logging
import os
import subprocess
import sys
import time
import webbrowser

import click

from .render import pi_string
from .stats import RunStats, timed
from .verify import verify_pi_string


def _run_app(host: str, port: int, open_browser: bool):
    url = f"http://{host}:{port}"
    cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        os.path.join(os.path.dirname(__file__), "streamlit_app.py"),
        "--server.address",
        host,
        "--server.port",
        str(port),
    ]
    proc = subprocess.Popen(cmd)
    if open_browser:
        for _ in range(60):
            time.sleep(0.2)
            try:
                webbrowser.open(url)
                break
            except webbrowser.Error:
                pass
    raise SystemExit(proc.wait())


def _check_threads(ctx, param, value):
    if value < 1:
        raise click.BadParameter("must be >= 1")
    return value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False), default="warning", show_default=True)
def main(log_level: str):
    logging.basicConfig(level=log_level.upper(), stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option("--host", default="localhost", show_default=True)
@click.option("--port", default=8501, show_default=True, type=int)
@click.option("--open/--no-open", default=True, show_default=True)
def app(host: str, port: int, open: bool):
    _run_app(host, port, open)


@main.command()
@click.option("-d", "--digits", default=1000, show_default=True, type=click.IntRange(min=0))
@click.option("-t", "--threads", default=1, show_default=True, type=int, callback=_check_threads)
@click.option("--processes/--threads-only", default=False, show_default=True)
@click.option("-s", "--stats", "show_stats", is_flag=True)
@click.option("-q", "--quiet", is_flag=True)
@click.option("--verify/--no-verify", default=False, show_default=True)
@click.option("--verify-samples", default=1000, show_default=True, type=int)
@click.option("--out", "out_path", default="", show_default=True)
def compute(
    digits: int,
    threads: int,
    processes: bool,
    show_stats: bool,
    quiet: bool,
    verify: bool,
    verify_samples: int,
    out_path: str,
):
    try:
        s, elapsed = timed(pi_string, digits, workers=threads, use_processes=processes)
    except ValueError as e:
        raise click.ClickException(str(e))
    if verify:
        ok, kind = verify_pi_string(s, verify_samples)
        if not ok:
            raise click.ClickException(f"verification failed ({kind})")
    if out_path:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(s + "\n")
        click.echo(out_path)
    elif not quiet:
        click.echo(s)
    if show_stats:
        for line in RunStats(digits, threads, elapsed).lines():
            click.echo(line, err=True)
