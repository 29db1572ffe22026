"""
Command-line tool that creates an Nginx Deployment on a Kubernetes cluster.
"""
__version__ = "1.0.0"
