"""
SQLAlchemy ORM Models
Product catalog tables read by the search arms: products, their shop
prices and their groups.

The search vectors are maintained by the database (trigger or migration);
the application only reads them. Required extensions: pg_trgm, unaccent.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Product(Base):
    """
    Product model.

    Searchable catalog item. ``unit`` holds the raw pack size string
    ("16 OZ", "1 LT", ...).
    """
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    unit = Column(String(64), nullable=True, comment='Raw unit string, e.g. "16 OZ"')
    deleted = Column(Boolean, nullable=True, server_default='false',
                     comment='Soft delete flag; deleted products never appear in search')

    # Accent-stripped search vectors, one per text search configuration
    name_unaccent_es = Column(TSVECTOR, nullable=True,
                              comment="to_tsvector('spanish', unaccent(name))")
    name_unaccent_en = Column(TSVECTOR, nullable=True,
                              comment="to_tsvector('english', unaccent(name))")

    prices = relationship('ProductShopPrice', back_populates='product')
    groups = relationship('ProductGroup', back_populates='product')

    __table_args__ = (
        Index('idx_products_name_unaccent_es', 'name_unaccent_es', postgresql_using='gin'),
        Index('idx_products_name_unaccent_en', 'name_unaccent_en', postgresql_using='gin'),
        Index('idx_products_name_trgm', 'name', postgresql_using='gin',
              postgresql_ops={'name': 'gin_trgm_ops'}),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"


class ProductShopPrice(Base):
    """
    Shop price listing for a product.

    A product is searchable only while at least one of its listings is
    not hidden.
    """
    __tablename__ = 'products_shops_prices'

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'),
                        nullable=False, index=True)
    shop_id = Column(Integer, nullable=True, index=True)
    current_price = Column(Numeric(10, 2), nullable=True)
    hidden = Column(Boolean, nullable=True, server_default='false',
                    comment='Hidden listings do not make a product searchable')

    product = relationship('Product', back_populates='prices')

    def __repr__(self):
        return f"<ProductShopPrice(product_id={self.product_id}, shop_id={self.shop_id})>"


class Group(Base):
    """
    Product group (category).

    ``human_name_id`` is the URL slug, e.g. ``desodorante-en-spray``; some
    groups enable group-specific unit conversions.
    """
    __tablename__ = 'groups'

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    human_name_id = Column(String(255), nullable=False, unique=True, index=True)

    products = relationship('ProductGroup', back_populates='group')

    __table_args__ = (
        Index('idx_groups_name_trgm', 'name', postgresql_using='gin',
              postgresql_ops={'name': 'gin_trgm_ops'}),
    )

    def __repr__(self):
        return f"<Group(id={self.id}, human_name_id='{self.human_name_id}')>"


class ProductGroup(Base):
    """Membership of a product in a group."""
    __tablename__ = 'products_groups'

    product_id = Column(Integer, ForeignKey('products.id', ondelete='CASCADE'), primary_key=True)
    group_id = Column(Integer, ForeignKey('groups.id', ondelete='CASCADE'), primary_key=True,
                      index=True)

    product = relationship('Product', back_populates='groups')
    group = relationship('Group', back_populates='products')

    def __repr__(self):
        return f"<ProductGroup(product_id={self.product_id}, group_id={self.group_id})>"
