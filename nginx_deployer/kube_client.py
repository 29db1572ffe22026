"""
Kubernetes client for deployment operations.
"""
import logging
from typing import Optional
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from .exceptions import ClientInitError, KubeconfigLoadError

logger = logging.getLogger(__name__)


class KubeClient:
    """Kubernetes client bound to a single kubeconfig file."""
    
    def __init__(self, namespace: str, kubeconfig: str, context: str | None = None):
        """
        Initialize Kubernetes client.
        
        Args:
            namespace: Target Kubernetes namespace
            kubeconfig: Path to the kubeconfig file
            context: Kubernetes context name (optional)
            
        Raises:
            KubeconfigLoadError: If the kubeconfig cannot be loaded
            ClientInitError: If the API client cannot be built
        """
        self.namespace = namespace
        self.kubeconfig = kubeconfig
        
        try:
            self.api_client = config.new_client_from_config(
                config_file=kubeconfig,
                context=context,
                persist_config=False
            )
        except Exception as e:
            logger.error(f"❌ Failed to load kubeconfig {kubeconfig}: {e}")
            raise KubeconfigLoadError(str(e)) from e
        
        try:
            self.apps_v1 = client.AppsV1Api(self.api_client)
            logger.info(f"✅ Kubernetes client initialized for namespace: {namespace}")
            
        except Exception as e:
            logger.error(f"❌ Failed to initialize Kubernetes client: {e}")
            self.api_client.close()
            raise ClientInitError(str(e)) from e
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc, tb):
        self.close()
    
    def close(self) -> None:
        """Release the connection pool held by the API client."""
        self.api_client.close()
    
    def create_deployment(
        self, body: client.V1Deployment, namespace: Optional[str] = None
    ) -> client.V1Deployment:
        """
        Create a deployment.
        
        Args:
            body: Deployment object to submit
            namespace: Target namespace, defaults to the client's namespace
            
        Returns:
            The deployment as stored by the API server
        """
        namespace = namespace or self.namespace
        try:
            return self.apps_v1.create_namespaced_deployment(
                namespace=namespace,
                body=body
            )
            
        except ApiException as e:
            logger.error(f"Failed to create deployment {body.metadata.name} in {namespace}: {e.status} {e.reason}")
            raise
