#!/usr/bin/env python

import environ


if __name__ == "__main__":
    environ.Env.read_env()

    # Delay import so the settings see the .env file
    from icpc_scoreboard.app import main
    main()
