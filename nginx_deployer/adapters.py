"""
Validation and submission of the Nginx deployment.
"""
import logging

from kubernetes.client.exceptions import ApiException, ApiValueError
from urllib3.exceptions import HTTPError

from .exceptions import DeploymentCreationError, InvalidScaleError, MissingVersionError
from .kube_types import NGINX_REPOSITORY, DeploymentResult, NginxDeployment

logger = logging.getLogger(__name__)


def get_replicas(scale: int) -> int:
    """Validate the scale flag and return the replica count for the deployment."""
    if scale <= 0:
        raise InvalidScaleError(scale)
    return scale


def prepare_nginx_image(version: str) -> str:
    """Build the image reference for an Nginx version; any non-empty version is accepted."""
    if not version:
        raise MissingVersionError()
    return f"{NGINX_REPOSITORY}:{version}"


def build_nginx_deployment(replicas: int, image: str):
    return NginxDeployment(replicas=replicas, image=image).to_body()


class KubeDeployAdapters:
    """Adapters between the CLI and the cluster client.

    ``kube_client`` only needs a ``create_deployment(body, namespace=...)``
    method, so tests can pass an in-memory stand-in.
    """
    
    def __init__(self, kube_client):
        self.kube_client = kube_client
    
    def deploy_nginx(self, replicas: int, image: str, namespace: str) -> DeploymentResult:
        """Create the Nginx deployment once. No retry and no update on conflict."""
        body = build_nginx_deployment(replicas, image)
        try:
            created = self.kube_client.create_deployment(body, namespace=namespace)
        except (ApiException, ApiValueError, HTTPError, OSError) as e:
            raise DeploymentCreationError(e) from e
        
        result = DeploymentResult(name=created.metadata.name, namespace=namespace)
        logger.info(f"✅ Created deployment {result.name} ({image}, replicas={replicas}) in {namespace}")
        return result
