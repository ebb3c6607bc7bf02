"""
碰撞檢測系統
"""


class CollisionDetector:
    """碰撞檢測器"""

    @staticmethod
    def check_gap_collision(player_x: int, player_y: float,
                            obstacle_x: int, gap_top: int,
                            gap_bottom: int) -> bool:
        """
        檢測玩家是否撞上障礙物

        只在 player_x == obstacle_x 的那一幀判定（不做掃掠檢測）

        Args:
            player_x: 玩家世界x座標
            player_y: 玩家y座標（截斷為整數比較）
            obstacle_x: 障礙物世界x座標
            gap_top: 缺口上緣
            gap_bottom: 缺口下緣

        Returns:
            是否發生碰撞
        """
        if player_x != obstacle_x:
            return False

        row = int(player_y)
        return row < gap_top or row > gap_bottom

    @staticmethod
    def check_out_of_bounds(player_y: float, screen_height: int) -> bool:
        """玩家是否掉出畫面底部"""
        return int(player_y) > screen_height
