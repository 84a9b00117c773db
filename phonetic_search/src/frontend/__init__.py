"""Front-ends for the phonetic search engine: command line (`python -m frontend`) and Flask web UI."""
