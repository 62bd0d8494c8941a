"""Catalog of macOS background security-update components.

Each entry names a component, the plist that carries its version, and the key
under which `defaults read` finds that version. The catalog is an immutable
tuple: order here is the order rows are reported in.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UpdateItem:
    """A security-update component tracked by plist path and version key."""

    name: str
    path: Path
    metadata_key: str


CATALOG: tuple[UpdateItem, ...] = (
    UpdateItem(
        name="XProtect",
        path=Path(
            "/System/Library/CoreServices/XProtect.bundle/Contents/Resources/XProtect.meta.plist"
        ),
        metadata_key="Version",
    ),
    UpdateItem(
        name="Gatekeeper",
        path=Path("/private/var/db/gkopaque.bundle/Contents/version.plist"),
        metadata_key="CFBundleShortVersionString",
    ),
    UpdateItem(
        name="SIP",
        path=Path("/System/Library/Sandbox/Compatibility.bundle/Contents/version.plist"),
        metadata_key="CFBundleShortVersionString",
    ),
    UpdateItem(
        name="MRT",
        path=Path("/System/Library/CoreServices/MRT.app/Contents/version.plist"),
        metadata_key="CFBundleShortVersionString",
    ),
    UpdateItem(
        name="Core Suggestions",
        path=Path(
            "/System/Library/Intelligent Suggestions/Assets.suggestionsassets/Contents/version.plist"  # noqa: E501
        ),
        metadata_key="CFBundleShortVersionString",
    ),
    UpdateItem(
        name="Incompatible Kernel Ext.",
        path=Path("/System/Library/Extensions/AppleKextExcludeList.kext/Contents/version.plist"),
        metadata_key="CFBundleShortVersionString",
    ),
    UpdateItem(
        name="Chinese Word List",
        path=Path(
            "/usr/share/mecabra/updates/com.apple.inputmethod.SCIM.bundle/Contents/version.plist"
        ),
        metadata_key="SUVersionString",
    ),
    UpdateItem(
        name="Core LSKD (dkrl)",
        path=Path("/usr/share/kdrl.bundle/info.plist"),
        metadata_key="CFBundleVersion",
    ),
)


def list_update_items() -> tuple[UpdateItem, ...]:
    """Return the catalog in declaration order."""
    return CATALOG
