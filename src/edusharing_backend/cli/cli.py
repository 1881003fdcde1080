import click

from .edusharing import parse_url, redirect_url

@click.group()
def cli():
    pass

cli.add_command(parse_url,"parse-url")
cli.add_command(redirect_url,"redirect-url")

if __name__ == '__main__':
    cli()
