# helpers/logger.py
import csv, json, datetime, pathlib
import numpy as np
import matplotlib.pyplot as plt


class RunLogger:
    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        self.root = pathlib.Path(root)
        self.dir = self.root / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.metrics = []  # list of dicts per step
        self._csv_header_written = False

    # ---------- logging ----------
    def log_step(self, step, **kwargs):
        row = {"step": int(step), **{k: float(v) for k, v in kwargs.items()}}
        self.metrics.append(row)
        with open(self.csv_path, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(row.keys()))
            if not self._csv_header_written:
                writer.writeheader()
                self._csv_header_written = True
            writer.writerow(row)

    def log_layer(self, step, layer, **kwargs):
        """
        Log a layer snapshot after a turn: the L2 norm of each trainable
        array (weights_norm, bias_norm) next to any extra metrics.
        A parameter-free layer logs only the extra metrics.
        """
        names = ("weights_norm", "bias_norm")
        norms = {
            name: float(np.linalg.norm(p)) for name, p in zip(names, layer.params())
        }
        self.log_step(step, **norms, **kwargs)
        return norms

    def save_json(self):
        with open(self.json_path, "w") as f:
            json.dump(self.metrics, f, indent=2)
        return str(self.json_path)

    def history(self):
        """Collected metrics as {name: [values...]}, in logging order."""
        out = {}
        for row in self.metrics:
            for k, v in row.items():
                if k == "step":
                    continue
                out.setdefault(k, []).append(v)
        return out

    # ---------- plotting ----------
    def _plots_dir(self, subdir):
        out = self.dir / subdir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def plot_loss(self, history, tag="run", subdir="plots"):
        """
        Saves loss curve as loss_curve_<tag>_steps_<n>.png.
        Accepts history with either keys:
          - {'loss': [...], 'val_loss': [...]}
          - or {'train_loss': [...], 'val_loss': [...]}
        """
        train_key = "loss" if "loss" in history else "train_loss"
        train = history.get(train_key, [])
        val = history.get("val_loss", [])

        outdir = self._plots_dir(subdir)
        total_steps = max(len(train), len(val))
        plt.figure()
        if len(train) > 0:
            plt.plot(train, label="train loss")
        if len(val) > 0:
            plt.plot(val, label="val loss")
        plt.xlabel("Step")
        plt.ylabel("Loss")
        plt.title(f"Loss vs Steps ({tag})")
        if len(train) > 0 or len(val) > 0:
            plt.legend()
        plt.tight_layout()
        path = outdir / f"loss_curve_{tag}_steps_{total_steps}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)
