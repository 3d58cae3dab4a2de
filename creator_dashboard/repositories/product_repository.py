"""
Product Repository - Data Access Layer for Products
"""
from typing import List

from creator_dashboard.core.database import get_db_connection_dict
from creator_dashboard.domain.product import Product


class ProductRepository:
    """Repository for Product data access"""

    def find_by_creator(self, creator_id: int) -> List[Product]:
        """
        Find all products owned by a seller

        Args:
            creator_id: Seller ID

        Returns:
            Products ordered by ID
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, creator_id, name, price, created_at, updated_at
                FROM products
                WHERE creator_id = %s
                ORDER BY id
            """, (creator_id,))

            rows = cursor.fetchall()
            return [Product(**row) for row in rows]

        finally:
            cursor.close()
            conn.close()
