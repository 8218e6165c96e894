"""Constructeur fluent pour assembler des commandes système.

Ce module fournit la classe CommandBuilder qui permet d'assembler
un ParameterSet via une API fluent. Les façades (apt, curl, echo,
opérations fichiers) ne décident que des flags à positionner ;
l'ordre des tokens est celui des appels.

Example:
    Construction d'une requête curl avec deux en-têtes :

        from linux_admin_utils.commands import CommandBuilder

        builder = (
            CommandBuilder("/usr/bin/curl")
            .with_flag_if("-L", follow_redirects)
            .with_option("-H", "Accept: application/json")
            .with_option("-H", "User-Agent: MyApp")
            .with_args(["http://example.com"])
        )
        builder.build_tokens()
        # Résultat : ["/usr/bin/curl", "-L",
        #             "-H", "Accept: application/json",
        #             "-H", "User-Agent: MyApp",
        #             "http://example.com"]
"""

from typing import Any, List, Optional, Sequence

from linux_admin_utils.commands.params import ParameterSet, serialize


class CommandBuilder:
    """Constructeur fluent pour assembler des commandes système."""

    def __init__(self, program: str) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du programme à exécuter.

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._program: str = program
        self._params = ParameterSet()

    @property
    def program(self) -> str:
        """Nom ou chemin du programme."""
        return self._program

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag booléen (ex: '-y', 'install').

        Args:
            flag: Flag à ajouter.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._params.add(flag)
        return self

    def with_flag_if(
        self, flag: str, condition: bool
    ) -> "CommandBuilder":
        """Ajoute un flag booléen seulement si la condition est vraie.

        Args:
            flag: Flag à ajouter.
            condition: Condition d'ajout.

        Returns:
            L'instance courante pour le chaînage.
        """
        if condition:
            self._params.add(flag)
        return self

    def with_option(
        self, flag: str, value: Any
    ) -> "CommandBuilder":
        """Ajoute une option valuée, émise en deux tokens.

        Appeler plusieurs fois avec le même flag produit autant de
        paires (flag, valeur), dans l'ordre des appels.

        Args:
            flag: Flag de l'option (ex: '-H').
            value: Valeur, convertie en chaîne (ex: 30 -> '30').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._params.add(flag, str(value))
        return self

    def with_option_if(
        self,
        flag: str,
        value: Optional[Any],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Ajoute une option seulement si la condition est vraie.

        L'option est ignorée si condition est False ou si
        value est None.

        Args:
            flag: Flag de l'option.
            value: Valeur de l'option (peut être None).
            condition: Condition d'ajout (défaut: True).

        Returns:
            L'instance courante pour le chaînage.
        """
        if condition and value is not None:
            self._params.add(flag, str(value))
        return self

    def with_args(
        self, args: Sequence[Any]
    ) -> "CommandBuilder":
        """Ajoute des arguments positionnels.

        Args:
            args: Arguments positionnels, convertis en chaînes.

        Returns:
            L'instance courante pour le chaînage.

        Raises:
            ConfigurationError: Si args est vide.
        """
        self._params.add(None, args)
        return self

    def build(self) -> ParameterSet:
        """Retourne le ParameterSet assemblé.

        Returns:
            Paramètres dans l'ordre des appels.
        """
        return ParameterSet(self._params.entries)

    def build_tokens(self) -> List[str]:
        """Construit la commande complète sous forme de liste.

        Returns:
            Programme suivi des tokens sérialisés.
        """
        return [self._program] + serialize(self._params)
