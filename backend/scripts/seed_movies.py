from pathlib import Path

from screamscore.api.deps import get_db_context
from screamscore.logging_ import setup_logger
from screamscore.sync.seed import load_seed_movies, seed_movies

script_dir = Path(__file__).resolve().parent
data_dir = script_dir.parent / "data"

seed_yaml_path = data_dir / "seed_movies.yaml"


if __name__ == "__main__":
    setup_logger("seed")
    seed = load_seed_movies(seed_yaml_path)
    with get_db_context() as session:
        seed_movies(session=session, seed=seed)
