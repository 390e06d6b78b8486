class SessionListener:
    """
    Fire-and-forget notifications emitted by the session.

    The default implementation ignores everything; the pygame frontend
    overrides these to play sound effects and background music.
    """

    def on_pellet_eaten(self):
        pass

    def on_player_died(self):
        pass

    def on_level_cleared(self):
        pass

    def on_music_start(self):
        pass

    def on_music_stop(self):
        pass
