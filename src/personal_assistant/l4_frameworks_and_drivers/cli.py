"""CLI entry point for personal-assistant."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from personal_assistant import __version__
from personal_assistant.l3_interface_adapters.gateways.http_api_client import DEFAULT_API_URL


@click.group()
@click.version_option(version=__version__)
def cli():
    """personal-assistant -- chat backend for an OpenAI-compatible API, plus a terminal client."""


@cli.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(),
    help='Path to YAML config file.',
)
@click.option('--host', default=None, help='Interface to bind (overrides server.host).')
@click.option('--port', default=None, type=int, help='Port to listen on (overrides server.port).')
@click.option('--no-preflight', is_flag=True, default=False, help='Skip the provider connectivity check.')
def serve(config_path, host, port, no_preflight):
    """Run the HTTP backend."""
    from personal_assistant.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from personal_assistant.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from personal_assistant.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    try:
        overrides: dict = {}
        if host:
            overrides.setdefault('server', {})['host'] = host
        if port is not None:
            overrides.setdefault('server', {})['port'] = port
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    log_path = setup_file_logging(Path(config.logging.directory), config.logging.level)
    click.echo(f'Logging to {log_path}')

    if not no_preflight:
        _preflight_provider(infra, config)

    import uvicorn  # noqa: PLC0415 -- deferred: server stack not loaded on --help

    from personal_assistant.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: FastAPI not loaded on --help
        DependencyContainer,
    )

    container = DependencyContainer(config, infra=infra)
    click.echo(f'Server listening on http://{config.server.host}:{config.server.port}/api')
    uvicorn.run(container.create_app(), host=config.server.host, port=config.server.port, log_level='warning')


@cli.command()
@click.option('-u', '--url', default=DEFAULT_API_URL, show_default=True, help='Base URL of the backend API.')
@click.option(
    '-e',
    '--export-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for exported chat history (default: current directory).',
)
def client(url, export_dir):
    """Run the terminal chat client."""
    from personal_assistant.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: not needed for --help
        LOG_DIR,
    )
    from personal_assistant.l4_frameworks_and_drivers.apps.chat import (  # noqa: PLC0415 -- deferred: Textual not loaded on --help
        ChatApp,
    )
    from personal_assistant.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_client_controller,
    )
    from personal_assistant.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    setup_file_logging(LOG_DIR)
    controller = build_client_controller(api_url=url)
    app = ChatApp(controller, export_dir=Path(export_dir) if export_dir else None)
    app.run()


def _preflight_provider(infra, config) -> list[str]:
    """Warn (never fail) when the provider is unreachable or the default model is missing."""
    from personal_assistant.l3_interface_adapters.gateways.openai_llm_client import (  # noqa: PLC0415 -- deferred: preflight only runs when starting the server
        OpenAICompatLLMClient,
    )

    client = OpenAICompatLLMClient(api_key=infra.openai.api_key, base_url=infra.openai.base_url)
    ok, err = client.check_connectivity()
    if not ok:
        click.echo(f'Warning: completion provider not reachable ({err}). Replies will fall back.', err=True)
        return []

    missing = client.check_models([config.assistant.model])
    for model in missing:
        click.echo(f"Warning: model '{model}' not available on the provider.", err=True)
    return missing
