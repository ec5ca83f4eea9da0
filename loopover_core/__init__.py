"""
Loopover core Python package.

The puzzle's state engine, split into small pure-logic modules:
- board.py: Board, Coord
- moves.py: Axis, Move, apply_move (rotation engine), format_move
- notation.py: parse_move, parse_moves, parse_dimensions
- shuffle.py: uniform_swap_shuffle, move_sequence_shuffle
- state.py: GameState (move counting session)
- errors.py: LoopoverError and the notation error kinds
- config.py, logging_config.py, cli.py: ambient plumbing and the batch CLI
"""
