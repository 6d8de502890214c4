from dz_validator_pda.cli import app


def main():
    app()


if __name__ == "__main__":
    main()
