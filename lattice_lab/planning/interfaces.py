from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class IPlannerObserver(ABC):
    """
    规划器观察者接口
    用于解耦搜索算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录入队、扩展、边，用于回放和画图
    3. Debug: 详细日志写入文件，用于问题排查
    """
    
    @abstractmethod
    def record_open_set_node(self, node: Any, cost: float = 0.0):
        """记录加入 frontier 的状态及其暂定代价"""
        pass
    
    @abstractmethod
    def record_current_expansion(self, node: Any, cost: float = 0.0):
        """记录当前正在扩展 (定案) 的状态及其代价"""
        pass
    
    @abstractmethod
    def record_edge(self, start_node: Any, end_node: Any):
        """记录搜索树的一条边 (前驱 -> 后继)"""
        pass
    
    @abstractmethod
    def set_map_info(self, map_info: Any):
        """设置本次搜索的栅格存储 (用于可视化或事后检查)"""
        pass
        
    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如状态详情、配置参数等)
        """
        pass
