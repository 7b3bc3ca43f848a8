"""Use cases: Application logic layer."""

from macadam.usecases.binary_downloader import BinaryDownloader, BinaryDownloadResult
from macadam.usecases.binary_provisioner import BinaryProvisioner
from macadam.usecases.command_builder import CommandBuilder, MacadamCommand
from macadam.usecases.platform_resolver import PlatformResolver
from macadam.usecases.settings_parser import SettingsParser, load_settings
from macadam.usecases.vm_list_parser import VmListParser

__all__ = [
    "BinaryDownloader",
    "BinaryDownloadResult",
    "BinaryProvisioner",
    "CommandBuilder",
    "MacadamCommand",
    "PlatformResolver",
    "SettingsParser",
    "load_settings",
    "VmListParser",
]
