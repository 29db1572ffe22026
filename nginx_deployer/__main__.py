from nginx_deployer.cli import run

run()
