import click
import yaml
from pydantic import ValidationError
from edusharing_backend.database import SessionLocal
from edusharing_backend.interface.context import RequestContext
from edusharing_backend.repositories.base import RepositoryError
from edusharing_backend.repositories.edusharing import EdusharingRepository
from edusharing_backend.services.identifiers import UnparsableReferenceError, get_object_id_from_url, get_repository_id_from_url
from edusharing_backend.services.redirect_url import DisplayMode, get_redirect_url
from edusharing_backend.settings import get_edusharing_settings

def read_context(filename: str) -> RequestContext:
    with open(filename, "r") as file:
        obj = yaml.safe_load(file)

    if obj == None:
        raise click.ClickException(f"Context file {filename} is empty")

    return RequestContext(**obj)

@click.command()
@click.argument("url")
def parse_url(url: str):
    try:
        repository_id = get_repository_id_from_url(url)
    except UnparsableReferenceError as e:
        raise click.ClickException(str(e))

    click.echo(f"repository: {repository_id}")
    click.echo(f"object:     {get_object_id_from_url(url)}")

@click.command()
@click.argument("resource_id", type=int)
@click.option("--context", "-c", "context_file", type=click.Path(exists=True, dir_okay=False), required=True, help="YAML file with the request context")
@click.option("--display", "-d", type=click.Choice([mode.value for mode in DisplayMode]), default=DisplayMode.DISPLAY.value)
def redirect_url(resource_id: int, context_file: str, display: str):
    context = read_context(context_file)

    db = SessionLocal()
    try:
        settings = get_edusharing_settings(db)
        resource = EdusharingRepository(db).get_resource(resource_id)
    except (RepositoryError, ValidationError) as e:
        raise click.ClickException(str(e))
    finally:
        db.close()

    url = get_redirect_url(resource, context, settings, display)
    if not url:
        raise click.ClickException(f"Invalid object url '{resource.object_url}'")

    click.echo(url)
