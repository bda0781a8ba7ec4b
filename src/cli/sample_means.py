import argparse
from pathlib import Path
from src.experiments.cases import MeanCheckConfig
from src.experiments.runner import run_mean_checks, write_csv
from src.experiments.plots import plot_expected_vs_computed, plot_error_by_family

def main(argv=None):
    parser = argparse.ArgumentParser(description="Comparar media pedida vs media muestral por distribución.")
    parser.add_argument("--count", type=int, default=100000, help="Muestras por caso")
    parser.add_argument("--seed", type=int, default=None, help="Semilla base (opcional)")
    parser.add_argument("--csv", type=Path, help="Guardar resultados en CSV")
    parser.add_argument("--plot", type=Path, help="PNG media esperada vs calculada (requiere --csv)")
    args = parser.parse_args(argv)
    if args.plot and not args.csv:
        parser.error("--plot requiere --csv")

    cfg = MeanCheckConfig.default()
    cfg.count = args.count
    cfg.seed = args.seed
    cfg.validate()
    print(cfg.summary())

    rows = run_mean_checks(cfg)
    for r in rows:
        if not r.accepted:
            continue
        print(f"{r.family.capitalize()} mean: {r.expected_mean:g}\nComputed: {r.computed_mean:g}")

    if args.csv:
        csv_path = write_csv(rows, args.csv)
        print(f"[OK] CSV → {csv_path}")
        if args.plot:
            plot_expected_vs_computed(csv_path, args.plot)
            plot_error_by_family(csv_path, args.plot.with_name(args.plot.stem + "_error.png"))
            print(f"[OK] Gráficas → {args.plot.parent}")

if __name__ == "__main__":
    main()
