"""Prompt templates for conversation summaries and question answering."""

from __future__ import annotations

from typing import Sequence

from webex_summarizer.webex.models import Message

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-part answers containing this phrase (any case) are dropped before synthesis.
NO_RELEVANT_INFO_MARKER = "NO RELEVANT INFORMATION"

EMPTY_SUMMARY = "No messages to summarize."

SUMMARY_SECTIONS = (
    "Structure your response with these bold section headers, each on its own line: "
    "**Overview**, **Key Topics**, **Decisions**, **Action Items**. "
    "Number the items under Decisions and Action Items and name the owner of each "
    "action item when it is known."
)


def render_message(message: Message) -> str:
    return (
        f"Time: {message.created_at.strftime(TIME_FORMAT)}\n"
        f"From: {message.sender}\n"
        f"Message: {message.text or ''}\n"
    )


def render_messages(messages: Sequence[Message]) -> str:
    return "\n".join(render_message(m) for m in messages)


def insufficient_information(question: str, room_label: str) -> str:
    return (
        f'I don\'t have enough information to answer "{question}". '
        f'Nothing in the conversation from "{room_label}" appears to address it.'
    )


# ---- Summarize ----

def full_summary_prompt(messages: Sequence[Message], room_label: str) -> str:
    return (
        "Please provide a concise summary of the following conversation from the "
        f'Webex room "{room_label}". Focus on the key points, decisions made, action '
        "items, and significant information shared. "
        f"{SUMMARY_SECTIONS}\n\n"
        f"Conversation:\n\n{render_messages(messages)}"
    )


def chunk_summary_prompt(
    messages: Sequence[Message], room_label: str, part: int, total: int
) -> str:
    return (
        f"You are summarizing part {part} of {total} of a long conversation from the "
        f'Webex room "{room_label}". The other parts are summarized separately and '
        "combined afterwards, so cover only this part. Capture the key points, "
        "decisions made, action items (with owners), and significant information "
        "shared, keeping names and dates.\n\n"
        f"Conversation (part {part} of {total}):\n\n{render_messages(messages)}"
    )


def combine_summaries_prompt(summaries: Sequence[str], room_label: str) -> str:
    labelled = "\n\n".join(
        f"Summary of Part {i}:\n{summary.strip()}"
        for i, summary in enumerate(summaries, start=1)
    )
    return (
        f"The following are summaries of {len(summaries)} consecutive parts of one "
        f'conversation from the Webex room "{room_label}". Combine them into a single '
        "coherent summary of the whole conversation. Merge repeated topics, keep the "
        "chronology where it matters, and do not mention the parts themselves. "
        f"{SUMMARY_SECTIONS}\n\n"
        f"{labelled}"
    )


# ---- Answer ----

def full_answer_prompt(
    messages: Sequence[Message], room_label: str, question: str
) -> str:
    return (
        "You are an AI assistant that helps users find information in their Webex "
        "conversations. I will provide you with an excerpt from the Webex room "
        f'"{room_label}" and a question. Answer the question based ONLY on the '
        "information in the conversation excerpt. If the question asks what was "
        "discussed on a specific date, summarize the main topics, decisions and tasks "
        "from the messages of that date.\n\n"
        "If the answer is not in the conversation excerpt, respond with EXACTLY this "
        f"phrase: {NO_RELEVANT_INFO_MARKER}. Do not make up information or apologize. "
        "Be direct and concise.\n\n"
        f"Conversation excerpt:\n\n{render_messages(messages)}\n"
        f"Question: {question}\n\n"
        "Answer based ONLY on the above conversation excerpt:"
    )


def chunk_answer_prompt(
    messages: Sequence[Message],
    room_label: str,
    question: str,
    part: int,
    total: int,
) -> str:
    return (
        f"You are reviewing part {part} of {total} of a long conversation from the "
        f'Webex room "{room_label}" to help answer a question. Extract only the '
        "information in this part that is relevant to the question, including who "
        "said it and when. Do not answer from general knowledge.\n\n"
        "If nothing in this part is relevant to the question, respond with EXACTLY "
        f"this phrase: {NO_RELEVANT_INFO_MARKER}\n\n"
        f"Question: {question}\n\n"
        f"Conversation (part {part} of {total}):\n\n{render_messages(messages)}"
    )


def combine_answers_prompt(
    findings: Sequence[tuple[int, str]], room_label: str, question: str, total: int
) -> str:
    labelled = "\n\n".join(
        f"Findings from Part {part}:\n{text.strip()}" for part, text in findings
    )
    return (
        f"A long conversation from the Webex room \"{room_label}\" was split into "
        f"{total} parts and searched for information relevant to a question. The "
        f"findings from the {len(findings)} relevant part(s) are below.\n\n"
        f"Question: {question}\n\n"
        "Using ONLY these findings, give a direct answer to the question first, then "
        "list the supporting evidence (who said what, and when). If the findings "
        "conflict, say so.\n\n"
        f"{labelled}"
    )
