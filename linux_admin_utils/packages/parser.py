"""Analyse tolérante des listings de paquets.

Format attendu, une ligne par paquet (sortie de ``apt list``) :

    nom/version architecture [statut] description

Les lignes vides, les avertissements (préfixe ``WARNING:``) et les
lignes qui ne respectent pas le format sont ignorés sans lever
d'exception : la sortie réelle n'est pas garantie homogène.
"""

import re
from typing import List

from linux_admin_utils.packages.base import PackageRecord

WARNING_PREFIX = "WARNING:"

_PACKAGE_LINE = re.compile(
    r"^(?P<name>\S+)/(?P<version>\S+) +(?P<architecture>\S+) +"
    r"\[(?P<status>[^\]]+)\] +(?P<description>.*)$"
)


def parse_package_listing(raw_text: str) -> List[PackageRecord]:
    """Convertit un listing de paquets en enregistrements typés.

    Fonction pure : l'ordre des lignes est conservé, sans tri ni
    déduplication.

    Args:
        raw_text: Sortie brute de la commande de listing.

    Returns:
        Liste de PackageRecord, un par ligne reconnue.
    """
    records: List[PackageRecord] = []
    for line in raw_text.split("\n"):
        if not line.strip() or line.startswith(WARNING_PREFIX):
            continue
        match = _PACKAGE_LINE.match(line)
        if match is None:
            continue
        records.append(PackageRecord(**match.groupdict()))
    return records
