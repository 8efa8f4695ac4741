"""User-friendly error message templates."""

import zipfile

import py7zr
import requests

from toum_updater.utils.errors import (
    ExtractionFailedError,
    MissingGameDirectoryError,
    UpdaterError,
)
from toum_updater.utils.symbols import LogSymbols


def get_user_friendly_error(error_type, error_details=""):
    """Convert error type to user-friendly message with actionable steps."""
    messages = {
        'network_timeout': (
            "Connection problem\n"
            "GitHub did not answer in time or could not be reached.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Check your internet connection\n"
            f"  {LogSymbols.BULLET} Try again later (GitHub might be busy)\n"
            f"  {LogSymbols.BULLET} Check if your firewall is blocking the connection"
        ),
        
        'network_404': (
            "Release not found (404)\n"
            "The repository or its latest release does not exist.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Check the owner/repo names in your config file\n"
            f"  {LogSymbols.BULLET} Check that the project has published a release"
        ),
        
        'rate_limited': (
            "GitHub refused the request (403)\n"
            "Anonymous API requests are rate limited per IP address.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Wait an hour and run the updater again"
        ),
        
        'disk_space': (
            "Not enough disk space\n"
            "The drive holding your Steam library is full.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Free up some space\n"
            f"  {LogSymbols.BULLET} Delete old mod backups you no longer need"
        ),
        
        'permission_denied': (
            "Permission denied\n"
            "The updater can't write to the Steam library folder.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Check folder permissions\n"
            f"  {LogSymbols.BULLET} Close the game if it's running"
        ),
        
        'corrupted_archive': (
            "Corrupted download\n"
            "The downloaded file is damaged or incomplete.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Run the updater again\n"
            f"  {LogSymbols.BULLET} Check your internet connection stability"
        ),
        
        'missing_game': (
            "Game folder missing\n"
            "The mod is built from a copy of the base game.\n"
            "Try:\n"
            f"  {LogSymbols.BULLET} Install the game through Steam first\n"
            f"  {LogSymbols.BULLET} Point --download-dir at your Steam library's common folder"
        ),
    }
    
    default_message = (
        f"Technical details: {error_details}\n"
        f"Try:\n"
        f"  {LogSymbols.BULLET} Check the log file for more information\n"
        f"  {LogSymbols.BULLET} Report this on GitHub if it persists"
    )
    
    return messages.get(error_type, default_message)


def suggest_fix_for_error(exception):
    """Map an exception (or the exception that caused it) to a message key."""
    if isinstance(exception, MissingGameDirectoryError):
        return 'missing_game'
    if isinstance(exception, ExtractionFailedError):
        cause = exception.__cause__
        if isinstance(cause, OSError) and not isinstance(cause, zipfile.BadZipFile):
            return suggest_fix_for_error(cause)
        return 'corrupted_archive'
    if isinstance(exception, UpdaterError):
        if exception.__cause__ is not None:
            return suggest_fix_for_error(exception.__cause__)
        return None
    
    # Network errors
    if isinstance(exception, requests.exceptions.Timeout):
        return 'network_timeout'
    elif isinstance(exception, requests.exceptions.ConnectionError):
        return 'network_timeout'
    elif isinstance(exception, requests.exceptions.HTTPError):
        if exception.response is None:
            return None
        if exception.response.status_code == 404:
            return 'network_404'
        elif exception.response.status_code == 403:
            return 'rate_limited'
    
    # File system errors
    elif isinstance(exception, PermissionError):
        return 'permission_denied'
    elif isinstance(exception, OSError):
        if 'No space left' in str(exception):
            return 'disk_space'
        return None
    
    # Archive errors
    elif isinstance(exception, (zipfile.BadZipFile, py7zr.Bad7zFile)):
        return 'corrupted_archive'
    
    return None  # No hint for this one
