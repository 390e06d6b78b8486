"""
Append-only leaderboard stored as ``name,score`` lines in a text file.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No scores yet!"


class Leaderboard:
    def __init__(self, path="leaderboard.txt"):
        self.path = Path(path)

    def save(self, name: str, score: int):
        # Vírgulas e quebras de linha quebrariam o formato de uma linha por registro
        clean = name.replace(",", " ").replace("\n", " ").replace("\r", " ")
        try:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(f"{clean},{int(score)}\n")
        except OSError as exc:
            logger.warning("could not write leaderboard %s: %s", self.path, exc)
            return
        logger.info("saved score %d for %r", score, clean)

    def load(self) -> list:
        if not self.path.exists():
            return []
        try:
            raw_lines = self.path.read_bytes().splitlines()
        except OSError as exc:
            logger.warning("could not read leaderboard %s: %s", self.path, exc)
            return []
        entries = []
        for lineno, raw_line in enumerate(raw_lines, 1):
            # cada linha é decodificada sozinha: um byte inválido perde só ela
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("skipping undecodable line %d: %r", lineno, raw_line)
                continue
            name, sep, raw = line.rstrip("\r").partition(",")
            if not sep:
                logger.debug("skipping malformed line %d: %r", lineno, line)
                continue
            try:
                score = int(raw)
            except ValueError:
                logger.debug("skipping malformed line %d: %r", lineno, line)
                continue
            entries.append((name, score))
        # sort é estável: empates mantêm a ordem do arquivo
        entries.sort(key=lambda e: e[1], reverse=True)
        return entries

    def top(self, limit: int = 10) -> list:
        return self.load()[:limit]


def format_leaderboard(entries, limit: int = 10) -> list:
    lines = [f"{i}. {name} - {score}" for i, (name, score) in enumerate(entries[:limit], 1)]
    return lines or [EMPTY_MESSAGE]
