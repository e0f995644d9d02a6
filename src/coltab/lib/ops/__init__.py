"""Operations exposed through the CLI."""
