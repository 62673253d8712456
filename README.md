# coopsweeper

Game logic for a cooperative, multiplayer minesweeper, together with a small
entity-component toolkit for modelling cells, players and UI elements.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The board

`coopsweeper.board.Board` holds the minefield as a flat, row-by-row list of
`CellValue` entries from `coopsweeper.models`, along with lists of which
cells are revealed and which are flagged.

The board does not place mines on its own. Cell contents arrive in a server
snapshot passed to `update_from_server`, or you can set `board.cells`
directly.

```python
from coopsweeper.board import Board
from coopsweeper.models import CellValue

board = Board(3, 3, 1, 20.0)
board.cells[8] = CellValue.mine()
board.cells[4] = board.cells[5] = board.cells[7] = CellValue.empty(1)

board.reveal_cell(0)       # floods outward from the empty corner
print(board.game_over, board.win)   # True True: every safe cell is open
```

- `reveal_cell(index)` does nothing on a revealed or flagged cell, or once the
  game is over. Opening a mine ends the game as lost and uncovers every mine.
  Opening a cell with no adjacent mines also opens its neighbours, and keeps
  going through any neighbours that have none either. An index outside the
  board raises `IndexError`.
- `toggle_flag(index)` flips the flag on an unopened cell while the game is
  still running.
- `check_win()` ends the game as a win once the number of open cells equals
  the number of cells that are not mines. It then flags every mine.
- `get_cell_index(x, y, canvas_width, canvas_height)` maps a point on a canvas
  with the board centred on it to a cell index. It returns `None` when the
  point lies off the board.
- `update_from_server(game_data)` applies a server snapshot. It reads the keys
  `boardWidth`, `boardHeight`, `mineCount`, `revealed`, `flagged`,
  `gameStarted`, `gameOver`, `win` and `cellValues`. `cellValues` maps cell
  indices, written as strings, to values, where `-1` stands for a mine.
- `initialize()` clears every cell and resets the game flags.

`coopsweeper.models` also defines `Screen` (`TITLE` or `GAME`) and `Player`,
which records a participant's id, name, cursor position, colour and score.

## Entities and components

`coopsweeper.entity_manager.EntityManager` creates, tags, indexes and removes
entities. `remove_entity` and `remove_entities` only queue a removal.
Queued entities are removed when `flush_removals()` runs, and their ids are
then recycled.

```python
from coopsweeper.entity_manager import EntityManager
from coopsweeper.cell_entity import create_empty_cell, reveal_cell, get_cell_state

manager = EntityManager()
cell = create_empty_cell(manager.create_builder(), 2, 3, 1)
cell_id = manager.register_entity(cell)
hit_mine = reveal_cell(manager, cell_id)      # False
print(get_cell_state(manager, cell_id))       # CellState(is_revealed=True, is_flagged=False)
```

Queries:

- `entities_with_tag(tag)` returns the ids of entities that carry a tag.
- `entities_with_component(type)` returns the ids of entities that hold a
  component type. `build_component_index(type)` rebuilds the index for that
  type.
- `query_with_component_and_tag(type, tag)` returns the ids of entities that
  match both.

Hierarchy:

- `set_parent(child, parent)` links two entities through a `Hierarchy`
  component. It raises `KeyError` if either entity is missing.
- `remove_entity_recursive(id)` queues an entity and all of its descendants
  for removal.

Adding components:

- `add_component(id, component)` attaches a component. If the component is a
  `Component` that lists `dependencies()`, any missing dependency is first
  created from the manager's `component_factory`. A dependency that is not
  registered raises `KeyError`. Missing dependencies with no factory set
  raise `RuntimeError`.

Other building blocks:

- `coopsweeper.entity`: `Entity` and `EntityId`.
- `coopsweeper.id_generator`: `EntityIdGenerator`. It hands out ids from 1 and
  can reuse recycled ids, most recently recycled first.
- `coopsweeper.cell`: `CellContent` and `CellState`.
- `coopsweeper.position`: `Position`, with `Position.cell(row, col)` and
  `distance`.
- `coopsweeper.player`: `PlayerComponent`, with `local`, `remote` and
  `update_action_time`. Times are in milliseconds.
- `coopsweeper.ui`: `Button`, which has colour presets and `is_hit`, plus
  `TextElement` and `IconElement`.
- `coopsweeper.component`: the `Component` base class with lifecycle hooks,
  `SerializableComponent` with `as_json` and `from_json`, and the abstract
  `ComponentDependencyHandler`.
- `coopsweeper.component_factory`: `ComponentFactory`, which builds default
  instances of registered types by type or by qualified name. Unknown types
  and names raise `KeyError`.
- `coopsweeper.component_vec`: `ComponentVec`, a per-type store keyed by
  entity id, with `optimize()` to drop empty slots.
- `coopsweeper.cell_entity`, `coopsweeper.player_entity` and
  `coopsweeper.ui_entity`: functions that build cell, player and UI entities
  and operate on them. These cover revealing and flagging cells, moving
  players and finding inactive ones, and hit-testing and looking up buttons.

## What it does not do

This package is the game's logic only. It has no network client or server,
draws nothing, has no game loop, and provides no command to run. It also does
not generate minefields: cell contents and game state come from the caller or
from a server snapshot.