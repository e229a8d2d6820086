"""
Chess Bot

Picks moves by asking an external UCI chess engine. Each call launches
a fresh engine process, runs the UCI handshake and a fixed-time search,
reads back the 'bestmove' line and tears the process down.

## Architecture

1. **engine**: External engine client
   - Engine locator (candidate paths + PATH lookup)
   - Process supervisor (pipes, non-blocking reads, guaranteed reaping)
   - Protocol driver (handshake, query, timeouts)
   - Result parser ('bestmove' extraction)

2. **config**: EngineSettings (UCI options, timeouts, engine location)

3. **utils**: Bratko-Kopec test suite runner

## Quick Start

### As a Python Library

```python
from chess_bot import move

best = move("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(best or "no move")
```

### From the Command Line

```bash
python -m chess_bot "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_bot.config import EngineSettings
from chess_bot.engine import EngineClient, EngineError, move

__all__ = [
    'EngineSettings',
    'EngineClient',
    'EngineError',
    'move',
]
