# app/models/__init__.py
from app.models.user_models import User
from app.models.customer_models import Company, Customer, Contact, Call
from app.models.product_models import Option, Product, ProductOption
from app.models.order_models import Order, OrderItem, OrderItemOption, OrderHistory
