"""
Point d'entrée CLI du dépôt Media Time.

Initialise le container DI, configure le logging et fournit les commandes CLI
d'administration (listing, lien, telechargement, serveur web).
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table
from sqlmodel import Session

from .config import Settings
from .container import Container, build_instance_manager
from .core.entities.request import Principal, RequestContext
from .core.exceptions import MediaTimeError
from .infrastructure.persistence.database import get_engine
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="mediatime-repository",
    help="Dépôt de fichiers Media Time",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _request_context(session: Session, user_id: int) -> RequestContext:
    principal = container.user_repository(session=session).get_user(user_id) if user_id else None
    return RequestContext(user=principal or Principal(), renderer=container.renderer())


def _open_session() -> Session:
    container.database.init()
    return Session(get_engine(get_config().database_url))


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"URL du site : {config.wwwroot}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Répertoire temporaire : {config.temp_dir}")
    typer.echo(f"Sources actives : {', '.join(config.enabled_sources) or 'aucune'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"repository_mediatime v{__version__}")


@app.command()
def listing(
    instance: Annotated[int, typer.Argument(help="ID de l'instance de dépôt")],
    user: Annotated[int, typer.Option("--user", "-u", help="ID de l'utilisateur courant")] = 0,
) -> None:
    """Affiche le listing des ressources Media Time d'une instance."""
    try:
        with _open_session() as session:
            manager = build_instance_manager(container, session)
            repo = manager.load(instance, _request_context(session, user))
            response = repo.get_listing()
    except MediaTimeError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"Ressources Media Time ({len(response.entries)})")
    table.add_column("Source", justify="right")
    table.add_column("Titre")
    table.add_column("Auteur")
    table.add_column("Cree le", justify="right")
    for entry in response.entries:
        table.add_row(str(entry.source), entry.title, entry.author, str(entry.datecreated))
    console.print(table)


@app.command()
def link(
    instance: Annotated[int, typer.Argument(help="ID de l'instance de dépôt")],
    source: Annotated[str, typer.Argument(help="ID de la ressource Media Time")],
) -> None:
    """Affiche l'URL de la vidéo d'une ressource."""
    try:
        with _open_session() as session:
            manager = build_instance_manager(container, session)
            repo = manager.load(instance, _request_context(session, 0))
            typer.echo(repo.get_link(source))
    except MediaTimeError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def fetch(
    instance: Annotated[int, typer.Argument(help="ID de l'instance de dépôt")],
    reference: Annotated[str, typer.Argument(help="Reference du fichier (ID de la ressource)")],
    save_as: Annotated[
        Optional[str], typer.Option("--save-as", help="Nom du fichier temporaire")
    ] = None,
) -> None:
    """Télécharge la vidéo référencée dans le répertoire temporaire."""
    try:
        with _open_session() as session:
            manager = build_instance_manager(container, session)
            repo = manager.load(instance, _request_context(session, 0))
            fetched = repo.get_file(reference, save_as or "")
    except (MediaTimeError, OSError) as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)
    typer.echo(f"Fichier : {fetched.path}")
    typer.echo(f"Source : {fetched.url}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'ecoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'ecoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web du dépôt."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("repository_mediatime.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)
    logger.info("Démarrage du dépôt Media Time", version=__version__)
    app()


if __name__ == "__main__":
    main()
