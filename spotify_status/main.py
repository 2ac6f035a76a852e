"""
Main CLI interface for spotify-status

Command-line entry point built with Click:
- now-playing: show the projected metadata of the current item
- watch: poll the player and print every status message as it is produced
- repeat: set or cycle the repeat mode
- canvas / lyrics: run a single asset lookup for a track id
- auth: login, logout, status
- config: show the effective settings, write a config file
"""

import asyncio
import functools
import sys

import click

from . import __version__
from .canvas.downloader import send_canvas
from .config.auth import get_auth
from .config.settings import get_settings, reload_settings
from .core.exceptions import SpotifyError
from .lyrics.provider import send_lyrics
from .spotify.client import get_spotify_client
from .spotify.info import InfoKind, to_update_int
from .spotify.models import SpotifyAlbum, SpotifyTrack
from .spotify.projection import (
    get_cover,
    get_creators,
    get_duration,
    get_grouping,
    get_id,
    get_resource,
)
from .spotify.reporter import StatusReporter
from .spotify.repeat import get_state
from .utils.http import close_http_session
from .utils.logger import configure_from_settings, get_current_log_file, get_logger

logger = get_logger(__name__)


def handle_error(func):
    """
    Decorator to handle common CLI errors gracefully

    Converts interrupts into exit code 130 and any other failure into a red
    message with exit code 1.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo(click.style("\n\nOperation cancelled by user", fg='yellow'))
            sys.exit(130)  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Command failed: {e}")
            click.echo(click.style(f"Error: {e}", fg='red'), err=True)
            sys.exit(1)
    return wrapper


def echo_message(kind: InfoKind, payload: str) -> None:
    """Message sink printing ``[KIND:index] payload``"""
    click.echo(f"[{kind.name}:{to_update_int(kind)}] {payload}")


def _track_stub(track_id: str) -> SpotifyTrack:
    return SpotifyTrack(
        id=track_id,
        name='',
        artists=[],
        album=SpotifyAlbum(id=None, name=''),
        duration_ms=0
    )


async def _run_sender(sender, track_id: str) -> None:
    try:
        await sender(_track_stub(track_id), echo_message)
    finally:
        await close_http_session()


async def _watch(interval: float) -> None:
    client = get_spotify_client()
    reporter = StatusReporter(echo_message)
    try:
        while True:
            try:
                playback = await asyncio.to_thread(client.get_playback)
            except SpotifyError as e:
                if e.is_auth_error:
                    raise
                logger.warning(f"Could not read playback: {e}")
            else:
                reporter.report(playback)
            await asyncio.sleep(interval)
    finally:
        await close_http_session()


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True, help='Show debug output on the console')
@click.option('--config', type=click.Path(), help='Path to config file')
@click.pass_context
def cli(ctx, version, verbose, config):
    """
    spotify-status - Live status of your Spotify player

    Shows what is playing with cover, canvas video and synced lyrics.
    """
    ctx.ensure_object(dict)

    if version:
        click.echo(f"spotify-status v{__version__}")
        return

    if config:
        reload_settings(config)

    configure_from_settings(verbose=verbose)
    ctx.obj['verbose'] = verbose

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command('now-playing')
@handle_error
def now_playing():
    """Show the item currently playing"""
    playback = get_spotify_client().get_playback()
    if playback is None or playback.item is None:
        click.echo("Nothing is playing")
        return

    item = playback.item
    resource = get_resource(item)
    grouping = get_grouping(item)
    duration = get_duration(item) // 1000
    progress = playback.progress_ms // 1000

    click.echo(click.style(resource.name, fg='green', bold=True))
    click.echo(f"  By:       {', '.join(creator.name for creator in get_creators(item))}")
    click.echo(f"  From:     {grouping.name if grouping else '-'}")
    click.echo(f"  Position: {progress // 60}:{progress % 60:02d} / {duration // 60}:{duration % 60:02d}")
    click.echo(f"  State:    {'playing' if playback.is_playing else 'paused'}, "
               f"repeat {playback.repeat_state.api_name}, "
               f"shuffle {'on' if playback.shuffle_state else 'off'}")
    click.echo(f"  Cover:    {get_cover(item) or '-'}")
    click.echo(f"  Id:       {get_id(item) or '-'}")
    click.echo(f"  Link:     {resource.url or '-'}")


@cli.command()
@click.option('--interval', '-i', type=float, help='Seconds between player polls')
@handle_error
def watch(interval):
    """Print status messages as playback changes"""
    settings = get_settings()
    interval = interval or float(settings.status.poll_interval)
    if interval <= 0:
        click.echo(click.style("Interval must be positive", fg='red'), err=True)
        sys.exit(1)

    logger.console_info(f"Watching playback every {interval:g}s (Ctrl+C to stop)")
    asyncio.run(_watch(interval))


@cli.command()
@click.argument('state', required=False, type=click.Choice(['track', 'context', 'off']))
@handle_error
def repeat(state):
    """Set the repeat mode, or cycle track -> context -> off when STATE is omitted"""
    client = get_spotify_client()
    if state:
        new_state = get_state(state)
        client.set_repeat(new_state)
    else:
        new_state = client.cycle_repeat()
    click.echo(f"Repeat: {new_state.api_name}")


@cli.command()
@click.argument('track_id')
@handle_error
def canvas(track_id):
    """Look up the canvas video of TRACK_ID"""
    asyncio.run(_run_sender(send_canvas, track_id))


@cli.command()
@click.argument('track_id')
@handle_error
def lyrics(track_id):
    """Print the synced lyrics of TRACK_ID"""
    asyncio.run(_run_sender(send_lyrics, track_id))


@cli.group()
def auth():
    """Spotify authentication"""
    pass


@auth.command()
@handle_error
def login():
    """Authorize spotify-status with your Spotify account"""
    user = get_auth().get_spotify_client().current_user()
    click.echo(click.style(f"Logged in as {user.get('display_name') or user.get('id')}", fg='green'))


@auth.command()
@handle_error
def logout():
    """Forget the cached Spotify token"""
    get_auth().revoke_token()


@auth.command()
@handle_error
def status():
    """Show whether a valid token is cached"""
    if get_auth().is_authenticated():
        click.echo(click.style("Authenticated", fg='green'))
    else:
        click.echo(click.style("Not authenticated (run: spotify-status auth login)", fg='yellow'))


@cli.group()
def config():
    """Configuration management"""
    pass


@config.command()
@handle_error
def show():
    """Show the effective configuration"""
    settings = get_settings()
    click.echo(str(settings))
    click.echo(f"  Config directory: {settings.get_config_directory()}")
    click.echo(f"  Canvas endpoint:  {settings.endpoints.canvas_url_template}")
    click.echo(f"  Lyrics endpoint:  {settings.endpoints.lyrics_url_template}")
    click.echo(f"  Client id set:    {'yes' if settings.spotify.client_id else 'no'}")
    click.echo(f"  Log file:         {get_current_log_file() or '-'}")

    problems = settings.validate()
    for problem in problems:
        click.echo(click.style(f"  ! {problem}", fg='yellow'))


@config.command()
@click.option('--path', type=click.Path(), help='Where to write the file')
@handle_error
def save(path):
    """Write the current configuration (without credentials) to YAML"""
    target = get_settings().save_config(path)
    click.echo(f"Configuration saved to {target}")


if __name__ == '__main__':
    cli()
