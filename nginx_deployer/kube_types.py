"""
Type definitions for the Kubernetes objects this tool creates.
"""
from dataclasses import dataclass, field
from typing import Dict

from kubernetes import client

DEPLOYMENT_NAME = "nginx-deployment"
NGINX_REPOSITORY = "nginx"
APP_LABELS = {"app": "nginx"}
CONTAINER_NAME = "web"
CONTAINER_PORT = 80


@dataclass
class NginxDeployment:
    """Desired state of the Nginx Deployment."""
    replicas: int
    image: str
    name: str = DEPLOYMENT_NAME
    labels: Dict[str, str] = field(default_factory=lambda: dict(APP_LABELS))
    container_name: str = CONTAINER_NAME
    container_port: int = CONTAINER_PORT

    def to_body(self) -> client.V1Deployment:
        """Render as an apps/v1 Deployment; selector and template share ``labels``."""
        container = client.V1Container(
            name=self.container_name,
            image=self.image,
            ports=[
                client.V1ContainerPort(
                    name="http",
                    protocol="TCP",
                    container_port=self.container_port,
                )
            ],
        )
        template = client.V1PodTemplateSpec(
            metadata=client.V1ObjectMeta(labels=dict(self.labels)),
            spec=client.V1PodSpec(containers=[container]),
        )
        spec = client.V1DeploymentSpec(
            replicas=self.replicas,
            selector=client.V1LabelSelector(match_labels=dict(self.labels)),
            template=template,
        )
        return client.V1Deployment(
            api_version="apps/v1",
            kind="Deployment",
            metadata=client.V1ObjectMeta(name=self.name),
            spec=spec,
        )


@dataclass
class DeploymentResult:
    """Created deployment as reported by the API server."""
    name: str
    namespace: str
