"""CLI interface for webex-summarizer."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from datetime import datetime

import click

from . import __version__
from .config import BACKENDS, Settings, load_settings
from .display import (
    display_name,
    format_answer,
    format_match,
    format_messages,
    format_summary,
    progress_bar,
)
from .exceptions import WebexSummarizerError
from .llm import LLMClient, list_models, model_details
from .search import (
    day_bounds,
    extract_date_from_question,
    filter_by_date,
    message_context,
    parse_date_bound,
    search_messages,
)
from .storage import ConversationStorage
from .summarizer import HierarchicalSummarizer, SummarizerConfig
from .webex import Conversation, WebexClient

logger = logging.getLogger(__name__)


@contextmanager
def _domain_errors():
    """Turn library errors into a clean CLI error message."""
    try:
        yield
    except WebexSummarizerError as e:
        raise click.ClickException(str(e)) from e


def _date_bound(end: bool):
    def callback(ctx, param, value):
        if value is None:
            return None
        try:
            return parse_date_bound(value, end=end)
        except ValueError as e:
            raise click.BadParameter(str(e)) from e

    return callback


def webex_options(func):
    func = click.option(
        "--output-dir",
        envvar="WEBEX_SUMMARIZER_DATA_DIR",
        type=click.Path(file_okay=False),
        help="Directory for saved conversations",
    )(func)
    func = click.option(
        "--token",
        envvar="WEBEX_TOKEN",
        help="Webex access token (default: $WEBEX_TOKEN)",
    )(func)
    return func


def model_options(func):
    func = click.option("--region", help="AWS region for Bedrock")(func)
    func = click.option("--aws-profile", help="AWS profile for Bedrock")(func)
    func = click.option(
        "--backend", type=click.Choice(BACKENDS), help="LLM backend"
    )(func)
    func = click.option("--model", help="Model id to use")(func)
    return func


def date_options(func):
    func = click.option(
        "--to", "date_to", callback=_date_bound(end=True),
        help="Only messages up to this date (yyyy-MM-dd)",
    )(func)
    func = click.option(
        "--from", "date_from", callback=_date_bound(end=False),
        help="Only messages from this date (yyyy-MM-dd)",
    )(func)
    return func


def _settings(**overrides) -> Settings:
    with _domain_errors():
        return load_settings(**overrides)


def _make_llm(settings: Settings) -> LLMClient:
    return LLMClient(
        api_key=settings.anthropic_api_key,
        model=settings.model,
        backend=settings.backend,
        aws_profile=settings.aws_profile,
        aws_region=settings.aws_region,
    )


def _make_summarizer(settings: Settings) -> HierarchicalSummarizer:
    return HierarchicalSummarizer(
        _make_llm(settings),
        SummarizerConfig.for_model(settings.model),
        on_progress=_echo_progress,
    )


def _echo_progress(current: int, total: int, status: str) -> None:
    click.echo("\r" + progress_bar(current, total, status), nl=False, err=True)
    if current == total:
        click.echo(err=True)


def _load_conversation(
    settings: Settings,
    storage: ConversationStorage,
    room: str | None,
    file: str | None,
    save: bool = True,
) -> Conversation:
    if file:
        return storage.load_conversation(file)
    if not room:
        raise click.UsageError("Provide either --room or --file.")
    conversation = WebexClient(settings.webex_token).download_conversation(room)
    if save:
        path = storage.save_conversation(conversation)
        click.echo(f"Conversation saved to: {path}", err=True)
    return conversation


def _no_messages_summary(
    room_title: str, date_from: datetime | None, date_to: datetime | None
) -> str:
    if date_from or date_to:
        start = date_from.strftime("%Y-%m-%d") if date_from else "the beginning"
        end = date_to.strftime("%Y-%m-%d") if date_to else "now"
        period = f"between {start} and {end}"
    else:
        period = "in the downloaded history"
    return (
        "**Overview**\n"
        f'No messages were found in "{room_title}" {period}, so there is nothing '
        "to summarize."
    )


@click.group()
@click.version_option(version=__version__, prog_name="webex-summarizer")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """webex-summarizer: download, search and summarize Webex conversations.

    Summaries and answers are generated with Claude (Anthropic API or AWS
    Bedrock). Conversations of any length are handled by summarizing them in
    parts and combining the results.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command("list-rooms")
@webex_options
@click.option("--type", "room_type", type=click.Choice(["direct", "group"]), help="Only rooms of this type")
@click.option("--id", "room_id", help="Show details of a single room")
def list_rooms(token, output_dir, room_type, room_id):
    """List the Webex rooms you belong to."""
    settings = _settings(webex_token=token, data_dir=output_dir)
    with _domain_errors():
        client = WebexClient(settings.webex_token)
        if room_id:
            room = client.get_room(room_id)
            click.echo(click.style(room.title, bold=True))
            click.echo(f"  ID:            {room.id}")
            click.echo(f"  Type:          {room.type}")
            if room.created:
                click.echo(f"  Created:       {room.created:%Y-%m-%d %H:%M:%S}")
            if room.last_activity:
                click.echo(f"  Last activity: {room.last_activity:%Y-%m-%d %H:%M:%S}")
            return
        rooms = client.list_rooms(room_type=room_type)

    if not rooms:
        click.echo("No rooms found.")
        return
    click.echo(click.style(f"Found {len(rooms)} rooms", bold=True))
    for room in rooms:
        activity = f"{room.last_activity:%Y-%m-%d}" if room.last_activity else "-"
        click.echo(f"  {room.title}  [{room.type or '?'}, last activity {activity}]")
        click.echo(f"    {room.id}")


@cli.command("list-models")
@click.option("--detail", "detail", metavar="MODEL", help="Show details of one model")
def list_models_cmd(detail):
    """List the Claude models the summarizer knows about."""
    if detail:
        click.echo(model_details(detail))
        return
    click.echo(click.style("Available models", bold=True))
    for info in list_models():
        click.echo(f"  {info.id}")
        click.echo(f"    {info.name} ({info.provider})")


@cli.command()
@webex_options
@click.option("--room", required=True, help="Room id to download")
def download(token, output_dir, room):
    """Download a room's message history and save it as JSON."""
    settings = _settings(webex_token=token, data_dir=output_dir)
    with _domain_errors():
        conversation = WebexClient(settings.webex_token).download_conversation(room)
        path = ConversationStorage(settings.data_dir).save_conversation(conversation)
    click.echo(f"Downloaded {len(conversation.messages)} messages from {conversation.room.title}")
    click.echo(f"Saved to: {path}")


@cli.command("list-messages")
@webex_options
@click.option("--room", help="Room id to download and list")
@click.option("--file", "file", type=click.Path(dir_okay=False), help="Saved conversation file")
@click.option("--save", is_flag=True, help="Save the downloaded conversation")
@click.option("--page", default=1, show_default=True, help="Page to show")
@click.option("--limit", default=1000, show_default=True, help="Messages per page")
@click.option("--references/--no-references", default=True, help="Show message numbers and ids")
def list_messages(token, output_dir, room, file, save, page, limit, references):
    """Show the messages of a room or a saved conversation, page by page."""
    settings = _settings(webex_token=token, data_dir=output_dir)
    with _domain_errors():
        storage = ConversationStorage(settings.data_dir)
        conversation = _load_conversation(settings, storage, room, file, save=save)
    click.echo(
        format_messages(conversation, page=page, per_page=limit, show_references=references)
    )


@cli.command("list-files")
@click.option(
    "--output-dir",
    envvar="WEBEX_SUMMARIZER_DATA_DIR",
    type=click.Path(file_okay=False),
    help="Directory for saved conversations",
)
def list_files(output_dir):
    """List saved conversation files."""
    settings = _settings(data_dir=output_dir)
    with _domain_errors():
        files = ConversationStorage(settings.data_dir).list_conversation_files()
    if not files:
        click.echo(f"No saved conversations in {settings.data_dir}")
        return
    click.echo(click.style(f"Saved conversations in {settings.data_dir}", bold=True))
    for path in files:
        click.echo(f"  {path.name}")


@cli.command()
@webex_options
@model_options
@date_options
@click.option("--room", help="Room id to download and summarize")
@click.option("--file", "file", type=click.Path(dir_okay=False), help="Saved conversation file")
@click.option("--list-summaries", is_flag=True, help="List saved conversations that have a summary")
def summarize(
    token, output_dir, model, backend, aws_profile, region,
    date_from, date_to, room, file, list_summaries,
):
    """Summarize a room or a saved conversation.

    Example:
        webex-summarizer summarize --room <room id> --from 2025-05-01
    """
    settings = _settings(
        webex_token=token,
        data_dir=output_dir,
        model=model,
        backend=backend,
        aws_profile=aws_profile,
        aws_region=region,
    )
    with _domain_errors():
        storage = ConversationStorage(settings.data_dir)
        if list_summaries:
            _echo_summaries(storage)
            return

        conversation = _load_conversation(settings, storage, room, file)
        messages = sorted(
            filter_by_date(conversation.messages, date_from, date_to),
            key=lambda m: m.created_at,
        )
        conversation.date_from, conversation.date_to = date_from, date_to

        if not messages:
            summary = _no_messages_summary(conversation.room.title, date_from, date_to)
        else:
            click.echo(
                f"Summarizing {len(messages)} messages from {conversation.room.title} "
                f"with {settings.model}",
                err=True,
            )
            summary = _make_summarizer(settings).summarize(messages, conversation.room.title)
        path = storage.save_summary(conversation, summary)

    click.echo(format_summary(summary))
    click.echo(f"\nSummary saved to: {path}", err=True)


def _echo_summaries(storage: ConversationStorage) -> None:
    found = 0
    for path in storage.list_conversation_files():
        try:
            conversation = storage.load_conversation(path)
        except WebexSummarizerError as e:
            logger.warning(f"Skipping {path.name}: {e}")
            continue
        if not conversation.summary:
            continue
        found += 1
        click.echo(click.style(conversation.room.title, bold=True) + f"  ({path.name})")
        click.echo(f"  Downloaded: {conversation.download_date:%Y-%m-%d %H:%M:%S}")
        first_line = conversation.summary.strip().splitlines()[0]
        click.echo(f"  {first_line}")
    if not found:
        click.echo("No saved summaries found.")


@cli.command()
@webex_options
@model_options
@date_options
@click.option("--room", help="Room id to download and search")
@click.option("--file", "file", type=click.Path(dir_okay=False), help="Saved conversation file")
@click.option("--query", help="Keyword to search for")
@click.option("--question", help="Question to answer from the conversation")
@click.option("--context", "context_size", default=2, show_default=True, help="Messages of context around each match")
def search(
    token, output_dir, model, backend, aws_profile, region,
    date_from, date_to, room, file, query, question, context_size,
):
    """Search a conversation by keyword, or ask a question about it.

    Examples:
        webex-summarizer search --file chat.json --query deadline
        webex-summarizer search --file chat.json --question "What was decided on May 26th?"
    """
    if not query and not question:
        raise click.UsageError("Provide --query and/or --question.")
    settings = _settings(
        webex_token=token,
        data_dir=output_dir,
        model=model,
        backend=backend,
        aws_profile=aws_profile,
        aws_region=region,
    )
    with _domain_errors():
        storage = ConversationStorage(settings.data_dir)
        conversation = _load_conversation(settings, storage, room, file)
        messages = sorted(conversation.messages, key=lambda m: m.created_at)

        if query:
            _echo_matches(messages, query, date_from, date_to, context_size)

        if question:
            start, end = date_from, date_to
            mentioned = extract_date_from_question(question)
            if mentioned:
                start, end = day_bounds(mentioned)
                click.echo(f"Looking at messages from {mentioned:%Y-%m-%d}", err=True)
            relevant = filter_by_date(messages, start, end)
            answer = _make_summarizer(settings).answer(
                relevant, conversation.room.title, question
            )
            click.echo(format_answer(question, answer))


def _echo_matches(messages, query, date_from, date_to, context_size) -> None:
    matches = search_messages(messages, query, date_from, date_to)
    click.echo(click.style(f'Found {len(matches)} messages matching "{query}"', bold=True))
    for index, match in enumerate(matches, start=1):
        context = message_context(messages, match, size=context_size)
        click.echo()
        click.echo(format_match(context, match, query, index, len(matches)))
    if matches:
        senders = sorted({display_name(m.sender) for m in matches})
        click.echo(f"\nSenders: {', '.join(senders)}")
