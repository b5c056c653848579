import lzss_parallel.benchmark as benchmark
from lzss_parallel.benchmark import plot_results, run_benchmarks


def _datasets():
    return {
        "runs": b"ab" * 50,
        "text": b"hello world, hello there " * 4,
    }


def test_run_benchmarks(small_params):
    df = run_benchmarks(_datasets(), params=small_params, workers=2)
    assert len(df) == 6
    assert df["valid"].all()
    seq = df[(df.dataset == "text") & (df.strategy == "sequential")].comp_bytes.item()
    bat = df[(df.dataset == "text") & (df.strategy == "batch")].comp_bytes.item()
    assert seq == bat


def test_plot_written(tmp_path, small_params):
    df = run_benchmarks(_datasets(), params=small_params, workers=2)
    path = plot_results(df, str(tmp_path / "plot.png"))
    assert (tmp_path / "plot.png").stat().st_size > 0
    assert path.endswith("plot.png")


def test_progress_output(monkeypatch, capsys, small_params):
    monkeypatch.setattr(benchmark, "G_PROGRESS", True)
    run_benchmarks({"one": b"aaaa"}, params=small_params, workers=1)
    assert "[BENCH] step 3/3 done." in capsys.readouterr().out


def test_default_datasets():
    sets = benchmark.default_datasets()
    assert set(sets) == {"repetitive_text", "english_like", "source_code",
                         "byte_counter", "random_bytes"}
    assert sets["random_bytes"] == benchmark.default_datasets()["random_bytes"]
    assert len(set(sets["random_bytes"])) > 200
