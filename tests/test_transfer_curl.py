"""Tests pour la façade CurlClient."""

from unittest.mock import MagicMock

import pytest

from linux_admin_utils.commands import (
    CommandExecutor,
    CommandResult,
    serialize,
)
from linux_admin_utils.errors import CommandFailed, ConfigurationError
from linux_admin_utils.transfer import (
    CURL_CMD,
    CurlClient,
    DownloadOptions,
    RequestOptions,
    TransferClient,
    TransferOptions,
    UploadOptions,
    extract_status_code,
)


def _result(stdout: str = "") -> CommandResult:
    """Crée un CommandResult réussi."""
    return CommandResult(
        command=[],
        return_code=0,
        stdout=stdout,
        stderr="",
        success=True,
        duration=0.0,
    )


class TestCurlClientCommandes:
    """Tests des commandes curl assemblées."""

    def setup_method(self):
        """Initialise un exécuteur mock pour chaque test."""
        self.executor = MagicMock(spec=CommandExecutor)
        self.executor.run.return_value = _result()
        self.client = CurlClient(self.executor)

    def _tokens(self):
        """Tokens du dernier appel à run()."""
        return serialize(self.executor.run.call_args[0][1])

    def test_implemente_transfer_client(self):
        """CurlClient implémente TransferClient."""
        assert isinstance(self.client, TransferClient)

    def test_download_simple(self):
        """L'URL seule."""
        self.client.download("http://example.com")
        assert self.executor.run.call_args[0][0] == CURL_CMD
        assert self._tokens() == ["http://example.com"]

    def test_download_options_ordonnees(self):
        """Options, en-têtes puis URL en dernier."""
        self.client.download(
            "http://example.com/f",
            DownloadOptions(
                follow_redirects=True,
                output="/tmp/f",
                timeout=10,
                headers={"Accept": "*/*", "X-Token": "abc"},
            ),
        )
        assert self._tokens() == [
            "-L",
            "-o", "/tmp/f",
            "--connect-timeout", "10",
            "--max-time", "10",
            "-H", "Accept: */*",
            "-H", "X-Token: abc",
            "http://example.com/f",
        ]

    def test_en_tetes_repetes(self):
        """Chaque en-tête produit sa propre paire -H."""
        self.client.request(
            "http://example.com",
            RequestOptions(headers={"A": "1", "B": "2", "C": "3"}),
        )
        tokens = self._tokens()
        assert tokens.count("-H") == 3
        assert tokens[-1] == "http://example.com"

    def test_authentification_et_agent(self):
        """-k, -A et -u."""
        self.client.download(
            "http://example.com",
            DownloadOptions(
                insecure=True,
                user_agent="MyApp 1.0",
                username="admin",
                password="secret",
            ),
        )
        assert self._tokens() == [
            "-k",
            "-A", "MyApp 1.0",
            "-u", "admin:secret",
            "http://example.com",
        ]

    def test_utilisateur_sans_mot_de_passe_ignore(self):
        """-u n'est émis qu'avec utilisateur et mot de passe."""
        self.client.download(
            "http://example.com", DownloadOptions(username="admin")
        )
        assert "-u" not in self._tokens()

    def test_download_sans_url(self):
        """Une URL absente lève ConfigurationError."""
        with pytest.raises(ConfigurationError):
            self.client.download("")
        self.executor.run.assert_not_called()

    def test_upload_post_brut(self):
        """POST sans Content-Type utilise -T."""
        self.client.upload("http://example.com/up", "/tmp/data.bin")
        assert self._tokens() == [
            "-X", "POST",
            "-T", "/tmp/data.bin",
            "http://example.com/up",
        ]

    def test_upload_avec_content_type(self):
        """Avec Content-Type, le fichier est envoyé via -d @fichier."""
        self.client.upload(
            "http://example.com/up",
            "/tmp/data.json",
            UploadOptions(headers={"Content-Type": "application/json"}),
        )
        assert self._tokens() == [
            "-X", "POST",
            "-H", "Content-Type: application/json",
            "-d", "@/tmp/data.json",
            "http://example.com/up",
        ]

    def test_upload_put(self):
        """Une méthode autre que POST utilise -d @fichier."""
        self.client.upload(
            "http://example.com/up", "/tmp/f", UploadOptions(method="PUT")
        )
        assert self._tokens()[:4] == ["-X", "PUT", "-d", "@/tmp/f"]

    def test_upload_sans_fichier(self):
        """Un fichier absent lève ConfigurationError."""
        with pytest.raises(ConfigurationError):
            self.client.upload("http://example.com", "")

    def test_request_complete(self):
        """Ordre des options d'une requête."""
        self.client.request(
            "http://example.com/api",
            RequestOptions(
                method="POST",
                data="a=1",
                silent=True,
                show_headers=True,
                headers={"Accept": "application/json"},
            ),
        )
        assert self._tokens() == [
            "-s",
            "-i",
            "-X", "POST",
            "-d", "a=1",
            "-H", "Accept: application/json",
            "http://example.com/api",
        ]

    def test_head(self):
        """head envoie -s -I."""
        self.client.head("http://example.com")
        assert self._tokens() == ["-s", "-I", "http://example.com"]

    def test_options_avec_en_tetes_hashables(self):
        """Des options portant des en-têtes restent hashables."""
        options = DownloadOptions(
            output="/tmp/f", headers={"Accept": "*/*"}
        )
        assert hash(options) == hash(
            DownloadOptions(output="/tmp/f", headers={"X": "y"})
        )
        assert {options: "ok"}[options] == "ok"

    def test_is_available(self):
        """is_available interroge le PATH via probe()."""
        self.executor.probe.return_value = True
        assert self.client.is_available() is True
        self.executor.probe.assert_called_once_with("curl")


class TestCurlClientStatut:
    """Tests de status_code() et is_accessible()."""

    def setup_method(self):
        """Initialise un exécuteur mock pour chaque test."""
        self.executor = MagicMock(spec=CommandExecutor)
        self.client = CurlClient(self.executor)

    def test_status_code_404(self):
        """Le code est extrait de la ligne de statut."""
        self.executor.run.return_value = _result("HTTP/1.1 404 Not Found")
        assert self.client.status_code("http://example.com") == 404

    def test_status_code_sans_ligne_http(self):
        """Aucune ligne HTTP/ : None, sans exception."""
        self.executor.run.return_value = _result("garbage\n")
        assert self.client.status_code("http://example.com") is None

    def test_status_code_echec_curl(self):
        """Un échec de curl donne None."""
        self.executor.run.side_effect = CommandFailed(
            ["curl"], exit_code=6, stderr="Could not resolve host"
        )
        assert self.client.status_code("http://invalide") is None

    def test_is_accessible_2xx(self):
        """Un code 200 est accessible."""
        self.executor.run.return_value = _result(
            "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n"
        )
        assert self.client.is_accessible("http://example.com") is True

    def test_is_accessible_404(self):
        """Un code 404 n'est pas accessible."""
        self.executor.run.return_value = _result("HTTP/1.1 404 Not Found")
        assert self.client.is_accessible("http://example.com") is False

    def test_is_accessible_echec_curl(self):
        """Un échec de curl donne False."""
        self.executor.run.side_effect = CommandFailed(["curl"], exit_code=7)
        assert self.client.is_accessible("http://example.com") is False

    def test_configuration_error_propagee(self):
        """Seul CommandFailed est converti : une URL vide lève."""
        with pytest.raises(ConfigurationError):
            self.client.is_accessible("")

    def test_options_transmises(self):
        """Les options de connexion sont reprises par la requête HEAD."""
        self.executor.run.return_value = _result("HTTP/1.1 200 OK")
        self.client.is_accessible(
            "http://example.com", TransferOptions(follow_redirects=True)
        )
        tokens = serialize(self.executor.run.call_args[0][1])
        assert tokens == ["-L", "-s", "-I", "http://example.com"]


class TestExtractStatusCode:
    """Tests pour extract_status_code()."""

    def test_premiere_ligne_de_statut(self):
        """La première ligne de statut l'emporte (redirections)."""
        output = (
            "HTTP/1.1 301 Moved Permanently\r\n"
            "Location: https://example.com/\r\n\r\n"
            "HTTP/1.1 200 OK\r\n"
        )
        assert extract_status_code(output) == 301

    def test_http_1_0(self):
        """HTTP/1.0 est reconnu."""
        assert extract_status_code("HTTP/1.0 500 Error") == 500

    def test_texte_vide(self):
        """Texte vide : None."""
        assert extract_status_code("") is None
