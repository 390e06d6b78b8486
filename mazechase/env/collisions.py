from collections import namedtuple

# pellet: há comida na célula do jogador
# enemy:  primeiro inimigo (na ordem do roster) que ocupa a célula, ou None
Contact = namedtuple("Contact", ["pellet", "enemy"])


def detect(player_pos, pellets, enemies) -> Contact:
    """Read-only overlap check; the session applies score and life changes."""
    hit = next((e for e in enemies if e.position == player_pos), None)
    return Contact(player_pos in pellets, hit)
