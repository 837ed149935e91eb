from __future__ import annotations

from reversi_tree.othello.game import Game


def get_children(game: Game) -> list[Game]:
    """
    Returns the games one ply after `game`: one per valid move, a single pass
    when there is no move, or nothing when the game is complete.
    """
    if game.is_complete():
        return []

    valid_moves = game.get_valid_moves()

    if not valid_moves:
        return [game.pass_move()]

    return [game.play(valid_move) for valid_move in valid_moves]


def expand(game: Game, depth: int) -> list[Game]:
    """
    Returns every game reachable from `game` in `depth` plies. Games that
    complete earlier stay in the result as they are.
    """
    if depth < 0:
        raise ValueError(f"Depth must not be negative, got {depth}")

    frontier = [game]

    for _ in range(depth):
        next_frontier: list[Game] = []
        expanded = False

        for current in frontier:
            children = get_children(current)

            if children:
                expanded = True
                next_frontier.extend(children)
            else:
                next_frontier.append(current)

        if not expanded:
            break

        frontier = next_frontier

    return frontier


def completions(game: Game, depth: int) -> list[Game]:
    return [child for child in expand(game, depth) if child.is_complete()]
