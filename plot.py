#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Dict, Any

def print_classification_report(res: Dict[str, Any], label: str) -> None:
	"""Accuracy, unclassified tuples and times, then the confusion matrix."""
	times = res["times"]
	fit = f" | fit={times['fit']*1000:.1f} ms" if "fit" in times else ""
	print(f"\n=== Classification report: {label} ===")
	print(f"Acc={res['acc']:.3f} | unclassified={res['unclassified']}/{len(res['y_true'])}"
		  f"{fit} | pred={times['predict']*1000:.1f} ms")
	print("Confusion matrix:\n", res["confusion"])

def plot_confusion(cm: pd.DataFrame, title: str = "Confusion matrix", show: bool = True):
	fig, ax = plt.subplots(figsize=(6, 5))
	im = ax.imshow(cm.to_numpy(), cmap="Blues")
	ax.set_xticks(np.arange(cm.shape[1]))
	ax.set_xticklabels([str(c) for c in cm.columns], rotation=45, ha="right")
	ax.set_yticks(np.arange(cm.shape[0]))
	ax.set_yticklabels([str(i) for i in cm.index])
	for i in range(cm.shape[0]):
		for j in range(cm.shape[1]):
			ax.text(j, i, str(cm.iat[i, j]), ha="center", va="center")
	ax.set_xlabel("Predicted")
	ax.set_ylabel("Actual")
	ax.set_title(title)
	fig.colorbar(im, ax=ax)
	fig.tight_layout()
	if show:
		plt.show()
	return fig
