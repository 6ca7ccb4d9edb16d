from sujaluxe.models.retailer import Retailer
from sujaluxe.models.customer import Customer
from sujaluxe.models.product import Product
from sujaluxe.models.order import Order
from sujaluxe.models.order_item import OrderItem
from sujaluxe.models.cart import CartItem
from sujaluxe.models.auction import Auction, Bid
from sujaluxe.models.review import Review
from sujaluxe.models.campaign import Campaign
from sujaluxe.models.notifications import Notification
from sujaluxe.models.negotiation import Negotiation, NegotiationMessage
from sujaluxe.models.room_design import RoomDesign

# add ALL models here
