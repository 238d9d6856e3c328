from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Versioned API
    path("api/v1/", include("modules.customers.urls")),
    path("api/v1/", include("modules.products.urls")),
    path("api/v1/", include("modules.orders.urls")),
]
