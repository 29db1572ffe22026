# cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .adapters import KubeDeployAdapters, get_replicas, prepare_nginx_image
from .config import Settings, get_settings
from .exceptions import DeployError, KubeconfigLoadError, MissingKubeconfigError
from .kube_client import KubeClient

logger = logging.getLogger(__name__)

_STAGE_PREFIXES = {
    "kubeconfig": "Error loading kubeconfig",
    "client": "Error creating Kubernetes client",
    "deploy": "Error deploying Nginx",
    "settings": "Error: invalid settings",
}


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Create an Nginx Deployment on a Kubernetes cluster",
    )
    p.add_argument("--version", default="", help="Version of Nginx to deploy")
    p.add_argument("--scale", type=int, default=1, help="Number of replicas to scale to")
    p.add_argument("--kubeconfig", default="", help="Path to kubeconfig file")
    p.add_argument("--namespace", default=settings.K8S_NAMESPACE,
                   help="Kubernetes namespace to deploy into")
    return p


def deploy(args: argparse.Namespace, settings: Settings) -> None:
    """Validate the flags, then create the deployment. Raises DeployError on any failure."""
    if not args.kubeconfig:
        raise MissingKubeconfigError()

    replicas = get_replicas(args.scale)
    image = prepare_nginx_image(args.version)

    with KubeClient(namespace=args.namespace, kubeconfig=args.kubeconfig,
                    context=settings.K8S_CONTEXT) as kube_client:
        result = KubeDeployAdapters(kube_client).deploy_nginx(replicas, image, args.namespace)

    print(f'Created deployment "{result.name}" in namespace "{result.namespace}".')


def _describe(exc: DeployError) -> str:
    prefix = _STAGE_PREFIXES.get(exc.stage, "Error")
    return f"{prefix}: {exc}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except DeployError as e:
        print(_describe(e), file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    args = build_parser(settings).parse_args(argv)

    try:
        deploy(args, settings)
    except DeployError as e:
        logger.debug(f"{e.stage} stage failed", exc_info=True)
        print(_describe(e), file=sys.stderr)
        return 1

    print(f"Nginx deployed successfully in namespace {args.namespace}.")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
