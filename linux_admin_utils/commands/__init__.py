"""Module d'exécution de commandes système.

Ce module fournit des classes pour construire, sérialiser et
exécuter des commandes système de manière structurée.

Classes et fonctions disponibles :
    ParameterEntry : Couple (flag, valeur) immuable.
    ParameterSet : Liste ordonnée de paramètres de commande.
    serialize : ParameterSet vers liste de tokens.
    serialize_to_string : ParameterSet vers chaîne (redirections).
    compose_redirection : Commande shell avec redirection.
    CommandResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandBuilder : Constructeur fluent de commandes.
    LinuxCommandExecutor : Exécuteur concret via subprocess.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
    AnsiCommandFormatter : Formatage ANSI coloré (console).
"""

from linux_admin_utils.commands.params import (
    ParameterEntry,
    ParameterSet,
    compose_redirection,
    serialize,
    serialize_to_string,
)
from linux_admin_utils.commands.base import (
    CommandResult,
    CommandExecutor,
)
from linux_admin_utils.commands.builder import CommandBuilder
from linux_admin_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
)
from linux_admin_utils.commands.runner import (
    LinuxCommandExecutor,
)

__all__ = [
    # Paramètres et sérialisation
    "ParameterEntry",
    "ParameterSet",
    "serialize",
    "serialize_to_string",
    "compose_redirection",
    # Structures de données
    "CommandResult",
    # Interface abstraite
    "CommandExecutor",
    # Constructeur
    "CommandBuilder",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Implémentation Linux
    "LinuxCommandExecutor",
]
