"""Module de gestion des paquets.

Classes et fonctions disponibles :
    PackageRecord : Paquet extrait d'un listing.
    PackageManager : Interface abstraite des gestionnaires de paquets.
    parse_package_listing : Analyse tolérante d'un listing apt.
    AptPackageManager : Façade apt-get/apt.
    AptOptions, InstallOptions, RemoveOptions, UpgradeOptions,
    CleanOptions : Options par opération.
"""

from linux_admin_utils.packages.base import PackageManager, PackageRecord
from linux_admin_utils.packages.parser import parse_package_listing
from linux_admin_utils.packages.apt import (
    APT_CMD,
    APT_GET_CMD,
    AptOptions,
    AptPackageManager,
    CleanOptions,
    InstallOptions,
    RemoveOptions,
    UpgradeOptions,
)

__all__ = [
    "PackageRecord",
    "PackageManager",
    "parse_package_listing",
    "APT_CMD",
    "APT_GET_CMD",
    "AptOptions",
    "InstallOptions",
    "RemoveOptions",
    "UpgradeOptions",
    "CleanOptions",
    "AptPackageManager",
]
