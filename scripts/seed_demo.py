import os
import sys

from sqlmodel import Session

# --- PATH SETUP ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.append(project_root)

from orderdesk.utils.db import engine, init_db
from orderdesk.stores import CustomerStore, OrderStore, ProductStore
from orderdesk.services.customers import CustomerService
from orderdesk.services.orders import OrderService
from orderdesk.services.products import ProductService
from orderdesk.pricing import order_total


def main():
    print("--- 🛒 OrderDesk demo data ---")
    init_db()

    with Session(engine) as session:
        products = ProductService(ProductStore(session))
        customers = CustomerService(CustomerStore(session), OrderStore(session))
        orders = OrderService(OrderStore(session), CustomerStore(session), ProductStore(session))

        notebook = products.create("Notebook", 250000)
        print(f"   🔹 Product {notebook.id}: {notebook.name} ({notebook.price_in_cents} cents)")

        if CustomerStore(session).exists_by_email("joao@x.com"):
            customer = customers.get_by_email("joao@x.com")
        else:
            customer = customers.create("João", "joao@x.com")
        print(f"   🔹 Customer {customer.id}: {customer.name} <{customer.email}>")

        order = orders.create_order(customer.id, [(notebook.id, 2)])
        print(f"   🔹 Order {order.id}: {order.status.value}, total {order_total(order.items)} cents")

    print("✅ Done.")


if __name__ == "__main__":
    main()
