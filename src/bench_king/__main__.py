from bench_king.cli.app import app

app(prog_name="bench-king")
