"""
Maze Chase
==========
Tile-based maze-chase arcade game: eat every pellet on the board while the
enemies chase you. Four hand-made levels, three lives per run and a
leaderboard saved to ``leaderboard.txt``.

Enemies come in two kinds:
- **Reactive** enemies walk in a straight line and bounce off walls.
- **Pursuit** enemies plan a shortest path to you with A* (Manhattan
  heuristic), but only while you are inside their habitat quadrant;
  elsewhere they bounce around like the reactive ones.

Run this file directly to play:
    python main.py [--level N] [--name NAME] [--leaderboard FILE]
"""

from mazechase.frontend import main

if __name__ == "__main__":
    print("=" * 50)
    print(" Maze Chase")
    print("=" * 50)
    main()
