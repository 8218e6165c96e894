"""Modèle de paramètres de ligne de commande et sérialisation.

Ce module définit :
    - ParameterEntry : Couple (flag, valeur) immuable.
    - ParameterSet : Liste ordonnée d'entrées, les flags pouvant
      se répéter (ex: plusieurs en-têtes -H pour curl).
    - serialize : Conversion en liste de tokens pour exécution directe.
    - serialize_to_string : Conversion en chaîne, réservée à la
      composition d'une commande shell avec redirection.
    - compose_redirection : Composition de la commande shell
      ``programme paramètres > fichier``.

Le ParameterSet n'est pas un dictionnaire : l'ordre d'insertion
détermine l'ordre final des tokens, et un même flag peut apparaître
plusieurs fois.

Example:
    Installation de deux paquets en mode non interactif :

        params = ParameterSet()
        params.add("-y")
        params.add(None, ["pkg1", "pkg2"])
        serialize(params)
        # Résultat : ["-y", "pkg1", "pkg2"]
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from linux_admin_utils.errors.exceptions import ConfigurationError

ParameterValue = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class ParameterEntry:
    """Entrée d'un ParameterSet.

    Attributes:
        flag: Nom du flag (ex: '-H'), None pour un argument positionnel.
        value: Valeur(s) associée(s), None pour un flag booléen.
    """

    flag: Optional[str] = None
    value: Optional[ParameterValue] = None

    def __post_init__(self) -> None:
        # Séquence figée en tuple de chaînes, scalaire converti en chaîne
        value = self.value
        if value is None or isinstance(value, str):
            return
        if isinstance(value, Sequence):
            object.__setattr__(
                self, "value", tuple(str(item) for item in value)
            )
        else:
            object.__setattr__(self, "value", str(value))

    def tokens(self) -> List[str]:
        """Retourne les tokens produits par cette entrée.

        Returns:
            Liste de tokens dans l'ordre d'émission.

        Raises:
            ConfigurationError: Si l'entrée n'a ni flag ni valeur,
                si le flag est une chaîne vide, ou si une entrée
                positionnelle n'a aucune valeur.
        """
        if self.flag is None and self.value is None:
            raise ConfigurationError(
                "Entrée invalide : ni flag ni valeur."
            )
        if self.flag is not None and not self.flag:
            raise ConfigurationError("Le flag ne peut pas être vide.")
        if self.flag is None and self.value == ():
            raise ConfigurationError(
                "Entrée positionnelle invalide : liste de valeurs vide."
            )

        tokens: List[str] = []
        if self.flag is not None:
            tokens.append(self.flag)
        if isinstance(self.value, tuple):
            tokens.extend(self.value)
        elif self.value is not None:
            tokens.append(self.value)
        return tokens


class ParameterSet:
    """Collection ordonnée d'entrées (flag, valeur).

    Les entrées sont conservées dans l'ordre d'insertion, sans
    déduplication. Une fois transmis au sérialiseur ou à
    l'exécuteur, le ParameterSet ne doit plus être modifié.
    """

    def __init__(
        self, entries: Optional[Sequence[ParameterEntry]] = None
    ) -> None:
        """Initialise le ParameterSet.

        Args:
            entries: Entrées initiales optionnelles.
        """
        self._entries: List[ParameterEntry] = list(entries or [])

    def add(
        self,
        flag: Optional[str],
        value: Union[None, str, int, Sequence[str]] = None,
    ) -> "ParameterSet":
        """Ajoute une entrée en fin de collection.

        Une séquence de valeurs est figée en tuple de chaînes, une
        valeur scalaire (ex: 30) est convertie en chaîne.

        Args:
            flag: Nom du flag ou None pour un positionnel.
            value: Valeur, séquence de valeurs ou None.

        Returns:
            L'instance courante pour le chaînage.

        Raises:
            ConfigurationError: Si flag et value sont tous deux None,
                ou si un positionnel reçoit une séquence vide.
        """
        entry = ParameterEntry(flag=flag, value=value)
        if flag is None and entry.value in (None, ()):
            raise ConfigurationError(
                "Entrée invalide : un positionnel exige une valeur."
            )
        self._entries.append(entry)
        return self

    @property
    def entries(self) -> Tuple[ParameterEntry, ...]:
        """Entrées dans l'ordre d'insertion."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[ParameterEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"ParameterSet({self._entries!r})"


def serialize(params: ParameterSet) -> List[str]:
    """Convertit un ParameterSet en liste de tokens.

    Un flag booléen produit un token, un flag valué produit le flag
    suivi de sa ou ses valeurs, une entrée positionnelle produit un
    token par valeur. Aucun réordonnancement n'est effectué.

    Args:
        params: Paramètres à sérialiser.

    Returns:
        Liste de tokens prête pour subprocess.

    Raises:
        ConfigurationError: Si une entrée est invalide.
    """
    tokens: List[str] = []
    for entry in params:
        tokens.extend(entry.tokens())
    return tokens


def serialize_to_string(params: ParameterSet) -> str:
    """Convertit un ParameterSet en chaîne séparée par des espaces.

    Aucun échappement n'est appliqué : cette forme sert uniquement
    à composer une commande shell avec redirection.

    Args:
        params: Paramètres à sérialiser.

    Returns:
        Tokens joints par un espace.

    Raises:
        ConfigurationError: Si une entrée est invalide.
    """
    return " ".join(serialize(params))


def compose_redirection(
    program: str,
    params: ParameterSet,
    target: str,
    append: bool = False,
) -> str:
    """Compose une commande shell redirigeant la sortie vers un fichier.

    Seul point du module produisant une commande destinée au shell.
    Le texte et le chemin ne sont pas échappés : ils sont interprétés
    par /bin/sh et ne doivent pas provenir d'une source non fiable.

    Args:
        program: Chemin du programme.
        params: Paramètres du programme.
        target: Fichier de destination.
        append: Utiliser '>>' au lieu de '>'.

    Returns:
        Commande shell complète.
    """
    redirect = ">>" if append else ">"
    parts = [program]
    arguments = serialize_to_string(params)
    if arguments:
        parts.append(arguments)
    parts += [redirect, target]
    return " ".join(parts)
