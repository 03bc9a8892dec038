from __future__ import annotations

LIST_PRODUCTS = """
query ListProducts($n:Int!) {
  products(first: $n, sortKey: CREATED_AT, reverse: true) {
    edges {
      node {
        id
        title
        handle
        onlineStoreUrl
        images(first: 1) { edges { node { url altText } } }
        priceRange {
          minVariantPrice { amount currencyCode }
          maxVariantPrice { amount currencyCode }
        }
        variants(first: 1) {
          nodes {
            id
            title
            availableForSale
            price { amount currencyCode }
            compareAtPrice { amount currencyCode }
          }
        }
      }
    }
  }
}
"""

PRODUCT_BY_HANDLE = """
query ProductByHandle($h:String!) {
  product(handle:$h) {
    id title handle description onlineStoreUrl
    images(first: 5) { edges { node { url altText } } }
    priceRange {
      minVariantPrice { amount currencyCode }
      maxVariantPrice { amount currencyCode }
    }
    variants(first: 20) {
      nodes {
        id title availableForSale
        price { amount currencyCode }
        compareAtPrice { amount currencyCode }
      }
    }
  }
}
"""

SEARCH_PRODUCTS = """
query SearchProducts($q:String!) {
  products(first: 10, query: $q) {
    edges {
      node {
        id title handle onlineStoreUrl
        images(first: 1) { edges { node { url altText } } }
        priceRange {
          minVariantPrice { amount currencyCode }
          maxVariantPrice { amount currencyCode }
        }
      }
    }
  }
}
"""

FIND_ORDER = """
query FindOrder($first:Int!, $q:String!) {
  orders(first: $first, query: $q, reverse: true) {
    nodes {
      id
      name
      email
      displayFinancialStatus
      displayFulfillmentStatus
      lineItems(first: 25) { nodes { name quantity } }
      fulfillments(first: 5) {
        status
        trackingInfo { number url company }
        trackingCompany
        trackingNumbers
        trackingUrls
      }
    }
  }
}
"""
