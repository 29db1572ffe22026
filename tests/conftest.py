"""
Pytest configuration and shared fixtures.

FakeKubeClient stands in for the cluster so no test needs a real API server.
"""

import pytest
from kubernetes.client.rest import ApiException

from nginx_deployer.config import get_settings


class FakeKubeClient:
    """In-memory deployments store with the same create semantics as the API server."""

    def __init__(self, namespace="default"):
        self.namespace = namespace
        self.deployments = {}
        self.create_calls = 0

    def create_deployment(self, body, namespace=None):
        namespace = namespace or self.namespace
        self.create_calls += 1
        stored = self.deployments.setdefault(namespace, {})
        if body.metadata.name in stored:
            raise ApiException(status=409, reason="Conflict")
        stored[body.metadata.name] = body
        return body

    def list_deployments(self, namespace=None):
        return list(self.deployments.get(namespace or self.namespace, {}).values())

    def close(self):
        pass


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test away from the caller's environment and .env file."""
    for name in ("APP_NAME", "K8S_NAMESPACE", "K8S_CONTEXT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_kube_client():
    return FakeKubeClient()


@pytest.fixture
def kubeconfig_file(tmp_path):
    """Minimal token-based kubeconfig; loading it does not contact the server."""
    path = tmp_path / "kubeconfig"
    path.write_text(
        """
apiVersion: v1
kind: Config
clusters:
- name: test
  cluster:
    server: https://127.0.0.1:6443
    insecure-skip-tls-verify: true
users:
- name: tester
  user:
    token: test-token-12345
contexts:
- name: test
  context:
    cluster: test
    user: tester
current-context: test
""",
        encoding="utf-8",
    )
    return str(path)
