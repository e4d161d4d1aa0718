#!/usr/bin/env python3
"""Play shiritori against the CPU in the terminal.

Typed answers go through the same pipeline as speech transcripts, so kanji,
katakana and digits are accepted.
"""

import argparse
import asyncio
import random
import sys

from shiritori import WORDS_FILE, TOKENIZER_BACKEND
from shiritori.game import GameSession, ListWordSource, get_lose_reason_message
from shiritori.logger import logger
from shiritori.nlp import get_transcript_processor
from shiritori.nlp.japanese import JapaneseRomanizer


def parse_args():
    parser = argparse.ArgumentParser(description="Shiritori against the CPU")
    parser.add_argument("--words", default=WORDS_FILE, help="CPU word list, one word per line")
    parser.add_argument("--tokenizer", default=TOKENIZER_BACKEND, help="Tokenizer backend: janome or kakasi")
    parser.add_argument("--typing", action="store_true", help="Practice typing each CPU word in romaji")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the CPU")
    return parser.parse_args()


def typing_feedback(romanizer: JapaneseRomanizer, typed: str) -> str:
    """One line of feedback for a romaji attempt, marking where it went wrong."""
    typed = typed.upper()
    if romanizer.is_typed_correctly(typed):
        return f"⭕ {typed}"
    matched = len(typed)
    while matched and not romanizer.is_prefix(typed[:matched]):
        matched -= 1
    if matched == len(typed):
        return f"… {typed}"
    return f"❌ {typed[:matched]}[{typed[matched:]}]"


async def practice_typing(loop, word: str) -> bool:
    """Ask for the romaji of *word* until it is typed right or skipped.

    Returns False when the player quits.
    """
    romanizer = JapaneseRomanizer(word)
    print("      " + " ".join(f"{s.kana}={s.romaji}" for s in romanizer.segments))
    while True:
        try:
            typed = await loop.run_in_executor(None, input, "      romaji> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        typed = typed.strip()
        if not typed:
            return True
        print("      " + typing_feedback(romanizer, typed))
        if romanizer.is_typed_correctly(typed):
            return True


async def main() -> int:
    args = parse_args()
    try:
        source = ListWordSource.from_file(args.words)
    except FileNotFoundError:
        logger.error(f"❌ Word list not found: {args.words}")
        return 1

    processor = get_transcript_processor(args.tokenizer)
    preload = asyncio.ensure_future(processor.preload())

    session = GameSession(source, rng=random.Random(args.seed))
    session.start()
    print(f"CPU: {session.current_word}")

    loop = asyncio.get_running_loop()
    playing = not args.typing or await practice_typing(loop, session.current_word)
    while playing:
        try:
            line = await loop.run_in_executor(None, input, f"「{session.need_head}」> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        word = await processor.process([{"text": line, "confidence": 1.0}])
        result = session.submit_user_word(word.raw)
        if not result.is_valid:
            print(result.message)
            break

        cpu_word = session.play_cpu_turn()
        if cpu_word is None:
            break
        print(f"CPU: {cpu_word}")
        if args.typing and not await practice_typing(loop, cpu_word):
            break

    if session.lose_reason is not None:
        print(get_lose_reason_message(session.lose_reason))
        print("🎉 You win!" if session.winner == "USER" else "CPU wins!")
    await preload
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
