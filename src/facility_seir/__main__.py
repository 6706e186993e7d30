"""
Entrypoint module, in case you use `python -mfacility_seir`.
"""

from facility_seir.cli import main

if __name__ == "__main__":
    main()
