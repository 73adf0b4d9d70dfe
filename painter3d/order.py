from __future__ import annotations
import logging
from typing import Dict, List, Optional, Set, Tuple

from .occlusion import Depth, Sink, depth_relation
from .spatial import Triangle3

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]   # (i, j): j треба намалювати перед i


class OcclusionGraph:
    """
    Орієнтований граф перекриттів для алгоритму художника.

    Вхід: список Triangle3 (вже трансформованих для поточного кадру).
    Ребро i -> j означає «трикутник i вище за j», тобто j малюється раніше.
    Порядок малювання дає postorder обходу в глибину: вершина потрапляє у вихід
    лише після всіх своїх «нижніх» сусідів.
    """

    def __init__(self, triangles: List[Triangle3], sink: Optional[Sink] = None):
        self.T: List[Triangle3] = list(triangles)
        self.sink = sink

        self.below: Dict[int, Set[int]] = {}   # i -> множина j, що лежать під i
        self.undetermined: List[Edge] = []     # пари, для яких порівняння неможливе

        self._build()
        logger.debug(
            "occlusion graph: %d triangles, %d edges, %d undetermined pairs",
            len(self.T), sum(len(s) for s in self.below.values()), len(self.undetermined),
        )

    # ---------------- Публічний API ----------------
    def edges(self) -> List[Edge]:
        return [(i, j) for i in sorted(self.below) for j in sorted(self.below[i])]

    def paint_order(self) -> List[int]:
        """
        Індекси трикутників у порядку малювання (спочатку найдальші).
        Сусідів обходимо за зростанням індексу, тому результат детермінований.
        Якщо граф має цикл, обхід усе одно завершується, але частина обмежень
        може бути порушена (див. validate()).
        """
        order: List[int] = []
        visited: Set[int] = set()
        for root in range(len(self.T)):
            if root in visited:
                continue
            visited.add(root)
            # стек пар (вершина, ітератор по її сусідах)
            stack = [(root, iter(sorted(self.below.get(root, ()))))]
            while stack:
                node, it = stack[-1]
                for nxt in it:
                    if nxt not in visited:
                        visited.add(nxt)
                        stack.append((nxt, iter(sorted(self.below.get(nxt, ())))))
                        break
                else:
                    stack.pop()
                    order.append(node)
        return order

    # ---------------- Внутрішні методи ----------------
    def _build(self) -> None:
        n = len(self.T)
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                rel = depth_relation(self.T[i], self.T[j], self.sink)
                if rel is Depth.ABOVE:
                    self.below.setdefault(i, set()).add(j)
                elif rel is Depth.UNDETERMINED:
                    self.undetermined.append((i, j))

    # ---------------- Діагностика ----------------
    def validate(self, order: Optional[List[int]] = None) -> dict:
        """
        Перевірка порядку малювання:
          - кожен індекс присутній рівно один раз;
          - для кожного ребра i -> j вершина j стоїть раніше за i
            (порушення можливі лише для циклічних графів).
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        if order is None:
            order = self.paint_order()
        pos = {node: k for k, node in enumerate(order)}

        missing = [i for i in range(len(self.T)) if i not in pos]
        violations = [(i, j) for (i, j) in self.edges()
                      if i in pos and j in pos and pos[j] > pos[i]]

        return {
            "triangles": len(self.T),
            "edges": len(self.edges()),
            "missing": missing,
            "violations": violations,
            "undetermined": list(self.undetermined),
        }
