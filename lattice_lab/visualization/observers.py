import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional
from lattice_lab.planning.interfaces import IPlannerObserver

class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def record_open_set_node(self, node: Any, cost: float = 0.0): pass
    def record_current_expansion(self, node: Any, cost: float = 0.0): pass
    def record_edge(self, start_node: Any, end_node: Any): pass
    def set_map_info(self, map_info: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录入队、扩展、边等关键算法执行内容。
    这些信息主要用于算法的比较和可视化 (Replay)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[state, cost]]
        self.open_set_history: List[Tuple[Any, float]] = []
        # 存储格式: List[state]，按扩展顺序
        self.expanded_nodes: List[Any] = []
        self.expanded_costs: List[float] = []
        # 存储格式: List[Tuple[start, end]]
        self.edges: List[Tuple[Any, Any]] = []
        # 入队与扩展的统一时间线: ('push' | 'expand', state, cost)
        self.timeline: List[Tuple[str, Any, float]] = []
        self.map_info = None
        self.messages: List[Tuple[str, str]] = []

    def record_open_set_node(self, node: Any, cost: float = 0.0):
        self.open_set_history.append((node, cost))
        self.timeline.append(('push', node, cost))

    def record_current_expansion(self, node: Any, cost: float = 0.0):
        self.expanded_nodes.append(node)
        self.expanded_costs.append(cost)
        self.timeline.append(('expand', node, cost))

    def record_edge(self, start_node: Any, end_node: Any):
        self.edges.append((start_node, end_node))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只保留消息，不打印
        self.messages.append((level, message))


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次搜索为什么失败或者扩展过多。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}.log")

        self.logger = logging.getLogger(f"LatticeDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Any, cost: float = 0.0):
        self.viz_observer.record_open_set_node(node, cost)

    def record_current_expansion(self, node: Any, cost: float = 0.0):
        self.viz_observer.record_current_expansion(node, cost)
        self.logger.debug(f"Expanding: {node} cost={cost:.4f}")

    def record_edge(self, start_node: Any, end_node: Any):
        self.viz_observer.record_edge(start_node, end_node)

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Map Info set: {map_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        self.viz_observer.log(message, level)
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放文件句柄 (测试中删除日志目录前需要调用)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Proxy properties for ExperimentObserver compatibility if needed by external tools
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def expanded_costs(self): return self.viz_observer.expanded_costs
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def timeline(self): return self.viz_observer.timeline
    @property
    def map_info(self): return self.viz_observer.map_info
