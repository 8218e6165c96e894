"""Transferts HTTP via curl.

Options communes émises dans cet ordre : -L, --connect-timeout,
--max-time, -k, -A, -u. Chaque en-tête produit sa propre paire
``-H "Clé: Valeur"`` ; l'URL est toujours le dernier argument.

Les vérifications d'accessibilité (is_accessible, status_code)
convertissent un échec d'exécution en résultat négatif au lieu de
propager CommandFailed.

Example:
    Téléchargement avec en-têtes :

        client = CurlClient(executor, logger)
        client.download(
            "https://example.com/file.tar.gz",
            DownloadOptions(
                output="/tmp/file.tar.gz",
                follow_redirects=True,
                headers={"Accept": "application/octet-stream"},
            ),
        )
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from linux_admin_utils.commands.base import CommandExecutor, CommandResult
from linux_admin_utils.commands.builder import CommandBuilder
from linux_admin_utils.errors.exceptions import (
    CommandFailed,
    ConfigurationError,
)
from linux_admin_utils.logging.base import Logger
from linux_admin_utils.transfer.base import TransferClient

CURL_CMD = "/usr/bin/curl"

_STATUS_LINE = re.compile(r"HTTP/\d\.\d\s+(\d{3})")


@dataclass(frozen=True)
class TransferOptions:
    """Options communes aux opérations curl.

    Attributes:
        follow_redirects: Suivre les redirections (-L).
        timeout: Délai en secondes, appliqué à la connexion
            (--connect-timeout) et au transfert (--max-time).
        insecure: Accepter les certificats invalides (-k).
        user_agent: User-Agent (-A).
        username: Utilisateur pour l'authentification basique.
        password: Mot de passe pour l'authentification basique.
        headers: En-têtes HTTP, émis dans l'ordre du dictionnaire.
    """

    follow_redirects: bool = False
    timeout: Optional[int] = None
    insecure: bool = False
    user_agent: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class DownloadOptions(TransferOptions):
    """Options de téléchargement (output : fichier de sortie, -o)."""

    output: Optional[str] = None


@dataclass(frozen=True)
class UploadOptions(TransferOptions):
    """Options d'envoi (method : méthode HTTP, POST par défaut)."""

    method: str = "POST"


@dataclass(frozen=True)
class RequestOptions(TransferOptions):
    """Options d'une requête HTTP arbitraire.

    Attributes:
        method: Méthode HTTP (-X), None pour le défaut de curl.
        data: Corps de la requête (-d).
        silent: Masquer la barre de progression (-s).
        show_headers: Inclure les en-têtes de réponse (-i).
        head_only: Requête HEAD, en-têtes uniquement (-I).
    """

    method: Optional[str] = None
    data: Optional[str] = None
    silent: bool = False
    show_headers: bool = False
    head_only: bool = False


def _require(value: Optional[str], name: str) -> None:
    if not value:
        raise ConfigurationError(f"{name} est requis.")


class CurlClient(TransferClient):
    """Façade curl.

    Attributes:
        _executor: Exécuteur de commandes.
        _logger: Logger optionnel.
        _curl_cmd: Chemin de curl.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        logger: Optional[Logger] = None,
        curl_cmd: str = CURL_CMD,
    ) -> None:
        self._executor = executor
        self._logger = logger
        self._curl_cmd = curl_cmd

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    @staticmethod
    def _with_connection(
        builder: CommandBuilder, options: TransferOptions
    ) -> CommandBuilder:
        """Ajoute les options de connexion et d'authentification."""
        credentials = None
        if options.username and options.password:
            credentials = f"{options.username}:{options.password}"
        return (
            builder
            .with_option_if("--connect-timeout", options.timeout)
            .with_option_if("--max-time", options.timeout)
            .with_flag_if("-k", options.insecure)
            .with_option_if("-A", options.user_agent)
            .with_option_if("-u", credentials)
        )

    @staticmethod
    def _with_headers(
        builder: CommandBuilder, options: TransferOptions
    ) -> CommandBuilder:
        for key, value in options.headers.items():
            builder.with_option("-H", f"{key}: {value}")
        return builder

    def _run(self, builder: CommandBuilder) -> CommandResult:
        return self._executor.run(builder.program, builder.build())

    def download(
        self,
        url: str,
        options: Optional[DownloadOptions] = None,
    ) -> CommandResult:
        """Télécharge une ressource.

        Args:
            url: URL source.
            options: Options de téléchargement.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si l'URL est absente.
            CommandFailed: Si curl échoue.
        """
        _require(url, "L'URL")
        options = options or DownloadOptions()
        self._log(f"Téléchargement depuis : {url}")
        builder = (
            CommandBuilder(self._curl_cmd)
            .with_flag_if("-L", options.follow_redirects)
            .with_option_if("-o", options.output)
        )
        self._with_connection(builder, options)
        self._with_headers(builder, options)
        return self._run(builder.with_args([url]))

    def upload(
        self,
        url: str,
        file: str,
        options: Optional[UploadOptions] = None,
    ) -> CommandResult:
        """Envoie un fichier vers une URL.

        Un POST sans en-tête Content-Type utilise -T (upload brut) ;
        les autres cas envoient le fichier comme corps via -d @fichier.

        Args:
            url: URL de destination.
            file: Chemin du fichier à envoyer.
            options: Options d'envoi.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si l'URL ou le fichier est absent.
        """
        _require(url, "L'URL")
        _require(file, "Le fichier")
        options = options or UploadOptions()
        self._log(f"Envoi de {file} vers : {url}")
        builder = CommandBuilder(self._curl_cmd).with_flag_if(
            "-L", options.follow_redirects
        )
        self._with_connection(builder, options)
        builder.with_option("-X", options.method)
        self._with_headers(builder, options)
        if (
            options.method.upper() == "POST"
            and "Content-Type" not in options.headers
        ):
            builder.with_option("-T", file)
        else:
            builder.with_option("-d", f"@{file}")
        return self._run(builder.with_args([url]))

    def request(
        self,
        url: str,
        options: Optional[RequestOptions] = None,
    ) -> CommandResult:
        """Effectue une requête HTTP.

        Args:
            url: URL cible.
            options: Options de la requête.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si l'URL est absente.
        """
        _require(url, "L'URL")
        options = options or RequestOptions()
        self._log(
            f"Requête {options.method or 'GET'} vers : {url}"
        )
        builder = CommandBuilder(self._curl_cmd).with_flag_if(
            "-L", options.follow_redirects
        )
        self._with_connection(builder, options)
        (
            builder
            .with_flag_if("-s", options.silent)
            .with_flag_if("-i", options.show_headers)
            .with_flag_if("-I", options.head_only)
            .with_option_if("-X", options.method)
            .with_option_if("-d", options.data)
        )
        self._with_headers(builder, options)
        return self._run(builder.with_args([url]))

    def head(
        self,
        url: str,
        options: Optional[TransferOptions] = None,
    ) -> CommandResult:
        """Récupère uniquement les en-têtes de réponse (-s -I)."""
        options = options or TransferOptions()
        return self.request(
            url,
            RequestOptions(
                follow_redirects=options.follow_redirects,
                timeout=options.timeout,
                insecure=options.insecure,
                user_agent=options.user_agent,
                username=options.username,
                password=options.password,
                headers=dict(options.headers),
                silent=True,
                head_only=True,
            ),
        )

    def _head_output(
        self, url: str, options: Optional[TransferOptions]
    ) -> Optional[str]:
        """Sortie d'une requête HEAD, None si curl a échoué."""
        try:
            return self.head(url, options).output
        except CommandFailed as e:
            self._log(f"URL inaccessible : {url} ({e.exit_code})")
            return None

    def is_accessible(
        self,
        url: str,
        options: Optional[TransferOptions] = None,
    ) -> bool:
        """Indique si l'URL répond avec un code 2xx.

        Un échec de curl est rapporté comme False, sans exception.
        """
        code = self.status_code(url, options)
        return code is not None and 200 <= code < 300

    def status_code(
        self,
        url: str,
        options: Optional[TransferOptions] = None,
    ) -> Optional[int]:
        """Retourne le code de statut HTTP de l'URL.

        Returns:
            Code à trois chiffres de la première ligne de statut,
            None si curl échoue ou si aucune ligne HTTP/x.y n'apparaît.
        """
        output = self._head_output(url, options)
        if output is None:
            return None
        return extract_status_code(output)

    def is_available(self) -> bool:
        """Indique si curl est présent dans le PATH."""
        return self._executor.probe("curl")


def extract_status_code(output: str) -> Optional[int]:
    """Extrait le code de la première ligne de statut HTTP/x.y.

    Args:
        output: En-têtes de réponse bruts.

    Returns:
        Code de statut ou None.
    """
    match = _STATUS_LINE.search(output)
    if match is None:
        return None
    return int(match.group(1))
