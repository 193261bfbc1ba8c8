"""Repository layer for the car rental database.

One module per entity, each function issuing a single statement:
- customers: list_all, get_by_id, find_by_id, get_with_reservations,
             get_with_bookings, get_contact_details, insert_customer,
             update_customer, delete_customer
- locations: get_with_cars
- cars: get_with_maintenance
"""
