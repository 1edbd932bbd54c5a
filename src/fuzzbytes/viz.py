from __future__ import annotations
from .models.trace import DecodeTrace

def plot_consumption(trace: DecodeTrace, *, show: bool = True):
    """Horizontal bars of the bytes each step took from the front and the back."""
    import matplotlib.pyplot as plt
    fig, ax = plt.subplots()
    for v in trace.values:
        y = v.index
        if v.consumed_front:
            ax.barh(y, v.consumed_front, left=v.front_before, color="tab:blue")
        if v.consumed_back:
            ax.barh(y, v.consumed_back, left=v.back_after, color="tab:orange")
    ax.set_xlim(0, max(trace.size, 1))
    ax.invert_yaxis()
    ax.set_yticks([v.index for v in trace.values])
    ax.set_yticklabels([v.name or v.op.value for v in trace.values])
    ax.set_xlabel("Buffer offset (bytes)")
    ax.set_title("Front (blue) / back (orange) consumption")
    if show:
        plt.show()
    return fig
