# 绘图逻辑 (Matplotlib)

import math
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from lattice_lab.config import PlannerConfig
from lattice_lab.map.discretizer import Discretizer
from lattice_lab.map.grid_store import GridStore
from lattice_lab.types import PlanResult
from lattice_lab.visualization.observers import ExperimentObserver


def plot_plan_result(result: PlanResult,
                     config: PlannerConfig,
                     observer: Optional[ExperimentObserver] = None,
                     ax=None,
                     save_path: Optional[str] = None):
    """
    画出工作空间边框、代价热力图、已扩展格子、路径 (格子中心) 和航向箭头。
    :return: matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    bounds = config.bounds
    discretizer = Discretizer(bounds, config.cell_size)

    # A. 工作空间边框
    ax.add_patch(Rectangle((bounds.u_min, bounds.v_min),
                           bounds.u_max - bounds.u_min,
                           bounds.v_max - bounds.v_min,
                           fill=False, edgecolor='black', linewidth=1.5))

    # B. 代价热力图：每个 (u, v) 格子取所有航向中的最小代价，未访问的格子留白
    if observer is not None and isinstance(observer.map_info, GridStore):
        best = np.min(observer.map_info.cost_array(), axis=2)
        ni, nj = best.shape
        heat = ax.imshow(np.ma.masked_invalid(best).T, origin='lower', cmap='viridis', alpha=0.5,
                         extent=(bounds.u_min, bounds.u_min + ni * config.cell_size.du,
                                 bounds.v_min, bounds.v_min + nj * config.cell_size.dv))
        ax.figure.colorbar(heat, ax=ax, label='Cost-to-come')

    # C. 已扩展状态 (只画位置)
    if observer is not None and observer.expanded_nodes:
        centers = [discretizer.to_configuration(s) for s in observer.expanded_nodes]
        ax.scatter([c.u for c in centers], [c.v for c in centers],
                   c='red', s=4, alpha=0.3, label='Expanded')

    # D. 路径
    if result.found:
        us = [c.u for c in result.configurations]
        vs = [c.v for c in result.configurations]
        ax.plot(us, vs, 'b-', linewidth=2, label='Lattice Path')

        arrow = 0.5 * min(config.cell_size.du, config.cell_size.dv)
        for c in result.configurations:
            ax.arrow(c.u, c.v, arrow * math.cos(c.theta_rad), arrow * math.sin(c.theta_rad),
                     head_width=arrow * 0.3, fc='blue', ec='blue')

    # E. 起点和终点
    ax.plot(config.start.u, config.start.v, 'go', markersize=10, label='Start')
    ax.plot(config.goal.u, config.goal.v, 'rx', markersize=10, label='Goal')

    title = f"{config.mode.name} lattice search"
    title += f" (cost={result.cost:g})" if result.found else f" (no path: {result.reason})"
    ax.set_title(title)
    ax.set_xlabel("U [m]")
    ax.set_ylabel("V [m]")
    ax.set_xlim(bounds.u_min, bounds.u_max)
    ax.set_ylim(bounds.v_min, bounds.v_max)
    ax.set_aspect('equal')
    ax.grid(True, linestyle=':', alpha=0.3)
    ax.legend(loc='upper right')

    if save_path:
        ax.figure.savefig(save_path)
    return ax
