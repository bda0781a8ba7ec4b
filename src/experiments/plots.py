from pathlib import Path
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def _accepted(csv_path: Path) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    df = df[df["accepted"]]
    return df[np.isfinite(df["expected_mean"])]

def plot_expected_vs_computed(csv_path: Path, out_png: Path):
    df = _accepted(csv_path)
    plt.figure()
    for fam in df["family"].unique():
        sub = df[df["family"] == fam]
        plt.scatter(sub["expected_mean"], sub["computed_mean"], label=fam)
    if len(df):
        lo = min(df["expected_mean"].min(), df["computed_mean"].min())
        hi = max(df["expected_mean"].max(), df["computed_mean"].max())
        plt.plot([lo, hi], [lo, hi], linestyle="--", color="gray")
    plt.xlabel("Media esperada")
    plt.ylabel("Media calculada")
    plt.title("Media esperada vs calculada por familia")
    plt.legend()
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()

def plot_error_by_family(csv_path: Path, out_png: Path):
    df = _accepted(csv_path)
    agg = df.groupby("family", as_index=False)["abs_error"].max()
    plt.figure()
    plt.bar(agg["family"], agg["abs_error"])
    plt.ylabel("Error absoluto máximo")
    plt.title("Error de la media muestral por familia")
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()
